"""Load ``rhai.toml`` into typed dataclasses and write starter configs."""

from __future__ import annotations

import typing as typ

import tomlkit
from tomlkit.exceptions import ParseError

from rhai_docs._constants import (
    DEFAULT_CODE_LANG,
    DEFAULT_CODE_THEME,
    DEFAULT_COLOR,
    SCRIPT_EXTENSION,
)

from .helpers import _as_bool, _build_color, _build_links, _optional_str
from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

KNOWN_KEYS = frozenset(
    {
        "name",
        "color",
        "icon",
        "stylesheet",
        "code_theme",
        "code_lang",
        "root",
        "index",
        "extension",
        "links",
        "google_analytics",
        "skip_private",
    }
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the TOML configuration describing the documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration file (usually ``rhai.toml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for every missing key.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the TOML cannot be parsed or a key holds a value of the wrong
        shape. The message names the offending file.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("rhai.toml"))  # doctest: +SKIP
    >>> config.code_lang  # doctest: +SKIP
    'rust'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    try:
        document = tomlkit.parse(path.read_text(encoding="utf-8"))
        raw: dict[str, typ.Any] = document.unwrap()
    except ParseError as exc:
        msg = f"{path}: {exc}"
        raise SiteConfigError(msg) from exc

    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        msg = f"{path}: unknown configuration keys: {', '.join(unknown)}"
        raise SiteConfigError(msg)

    color = _build_color(raw.get("color"), path=path)
    extension = _optional_str(raw.get("extension"), key="extension", path=path)
    skip_private = _as_bool(raw.get("skip_private"), key="skip_private", path=path)

    return SiteConfig(
        name=_optional_str(raw.get("name"), key="name", path=path) or "",
        color=color or SiteConfig().color,
        icon=_optional_str(raw.get("icon"), key="icon", path=path),
        stylesheet=_optional_str(raw.get("stylesheet"), key="stylesheet", path=path),
        code_theme=_optional_str(raw.get("code_theme"), key="code_theme", path=path)
        or DEFAULT_CODE_THEME,
        code_lang=_optional_str(raw.get("code_lang"), key="code_lang", path=path)
        or DEFAULT_CODE_LANG,
        root=_optional_str(raw.get("root"), key="root", path=path),
        index=_optional_str(raw.get("index"), key="index", path=path),
        extension=(extension or SCRIPT_EXTENSION).lstrip("."),
        links=_build_links(raw.get("links"), path=path),
        google_analytics=_optional_str(
            raw.get("google_analytics"), key="google_analytics", path=path
        ),
        skip_private=True if skip_private is None else skip_private,
    )


def write_default_config(path: Path) -> Path:
    """Write a commented starter configuration to ``path``.

    Raises
    ------
    FileExistsError
        If ``path`` already exists; existing configs are never overwritten.
    """
    if path.exists():
        msg = f"Configuration file '{path}' already exists."
        raise FileExistsError(msg)

    doc = tomlkit.document()
    doc.add(tomlkit.comment("rhai-docs site configuration"))
    doc.add(tomlkit.nl())
    doc["name"] = "My Rhai Project"
    doc["name"].comment("Site title shown in the header of every page")
    doc["color"] = list(DEFAULT_COLOR)
    doc["color"].comment("Accent colour as [red, green, blue]")
    doc["index"] = "index.md"
    doc["index"].comment("Narrative page rendered as index.html")
    doc["code_theme"] = DEFAULT_CODE_THEME
    doc["code_lang"] = DEFAULT_CODE_LANG
    doc["code_lang"].comment("Language for code blocks without a tag")
    doc["skip_private"] = True
    doc.add(tomlkit.nl())
    doc.add(tomlkit.comment('icon = "logo.svg"'))
    doc.add(tomlkit.comment('stylesheet = "custom.css"'))
    doc.add(tomlkit.comment('root = "/docs/"'))
    doc.add(tomlkit.comment('extension = "rhai"'))
    doc.add(tomlkit.comment('google_analytics = "G-XXXXXXX"'))
    doc.add(tomlkit.nl())
    links = tomlkit.aot()
    links.append(tomlkit.item({"name": "Rhai", "link": "https://rhai.rs"}))
    doc["links"] = links

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return path


__all__ = ["load_site_config", "write_default_config"]
