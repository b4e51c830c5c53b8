"""Unit tests for loading and generating ``rhai.toml``.

Usage
-----
Run ``pytest tests/test_config.py -v``. Tests use pytest's ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rhai_docs.config import (
    ExternalLink,
    Rgb,
    SiteConfig,
    SiteConfigError,
    load_site_config,
    write_default_config,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "rhai.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """Every key is optional."""
    config = load_site_config(_write(tmp_path, ""))
    assert config == SiteConfig(), "expected the default configuration"
    assert config.color == Rgb(246, 119, 2)
    assert config.code_lang == "rust"
    assert config.skip_private is True


def test_full_config_is_parsed(tmp_path: Path) -> None:
    """All supported keys map onto the dataclass."""
    config = load_site_config(
        _write(
            tmp_path,
            """
name = "My Project"
color = [10, 20, 30]
icon = "assets/logo.png"
stylesheet = "extra.css"
code_theme = "friendly"
code_lang = "js"
root = "/docs/"
index = "intro.md"
extension = ".rhai"
google_analytics = "G-123"
skip_private = false

[[links]]
name = "Home"
link = "https://example.com"
""",
        ),
    )
    assert config.name == "My Project"
    assert config.color == Rgb(10, 20, 30)
    assert config.icon == "assets/logo.png"
    assert config.stylesheet == "extra.css"
    assert config.code_theme == "friendly"
    assert config.code_lang == "js"
    assert config.root == "/docs/"
    assert config.index == "intro.md"
    assert config.extension == "rhai", "expected the leading dot to be stripped"
    assert config.google_analytics == "G-123"
    assert config.skip_private is False
    assert config.links == [ExternalLink(name="Home", link="https://example.com")]


def test_color_css_helpers() -> None:
    """Colours render as ``rgb()`` and ``rgba()`` CSS values."""
    color = Rgb(255, 0, 51)
    assert color.css() == "rgb(255, 0, 51)"
    assert color.css_alpha(255) == "rgba(255, 0, 51, 1.0)"


def test_missing_config_raises(tmp_path: Path) -> None:
    """A missing configuration file is reported by path."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.toml")


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("colour = [1, 2, 3]\n", "unknown configuration keys: colour"),
        ("color = [1, 2]\n", "'color' must be an array"),
        ("color = [1, 2, 300]\n", "'color' must be an array"),
        ("name = 3\n", "'name' must be a string"),
        ("skip_private = \"yes\"\n", "'skip_private' must be a boolean"),
        ("links = \"x\"\n", "'links' must be an array of tables"),
        ("[[links]]\nname = \"x\"\n", "require string 'name' and 'link'"),
        ("name = \n", "rhai.toml"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str, message: str) -> None:
    """Invalid values raise ``SiteConfigError`` naming the file."""
    path = _write(tmp_path, text)
    with pytest.raises(SiteConfigError, match=message) as excinfo:
        load_site_config(path)
    assert str(path) in str(excinfo.value)


def test_default_config_round_trips(tmp_path: Path) -> None:
    """The starter configuration loads back with its documented values."""
    path = write_default_config(tmp_path / "nested" / "rhai.toml")
    text = path.read_text(encoding="utf-8")
    assert "# rhai-docs site configuration" in text
    config = load_site_config(path)
    assert config.name == "My Rhai Project"
    assert config.index == "index.md"
    assert config.color == Rgb(246, 119, 2)
    assert config.links == [ExternalLink(name="Rhai", link="https://rhai.rs")]


def test_default_config_never_overwrites(tmp_path: Path) -> None:
    """An existing configuration file is left untouched."""
    path = _write(tmp_path, 'name = "Keep me"\n')
    with pytest.raises(FileExistsError):
        write_default_config(path)
    assert path.read_text(encoding="utf-8") == 'name = "Keep me"\n'
