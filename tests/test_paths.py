"""Unit tests for output links and root-prefix computation.

Usage
-----
Run ``pytest tests/test_paths.py -v``.
"""

from __future__ import annotations

from pathlib import Path, PurePath

import pytest

from rhai_docs.generator import root_prefix
from rhai_docs.generator.paths import display_name, output_link


@pytest.mark.parametrize(
    ("output_path", "expected"),
    [
        ("index.html", ""),
        ("dist/index.html", ""),
        ("dist/guide/intro.html", "../"),
        ("dist/a/b/c.html", "../../"),
    ],
)
def test_root_prefix_by_depth(output_path: str, expected: str) -> None:
    """Depth 1 and 2 need no prefix; deeper files climb ``depth - 2`` levels."""
    assert root_prefix(PurePath(output_path), PurePath(".")) == expected, (
        f"unexpected prefix for {output_path}"
    )


def test_root_prefix_prefers_explicit_root() -> None:
    """A configured root replaces the computed prefix on every page."""
    assert root_prefix(PurePath("dist/a/b/c.html"), PurePath("."), "/docs/") == "/docs/"


def test_root_prefix_relative_to_site_root() -> None:
    """Depth is measured from the given site root."""
    site_root = PurePath("/srv/project")
    assert root_prefix(site_root / "dist" / "index.html", site_root) == ""
    assert root_prefix(site_root / "dist" / "sub" / "x.html", site_root) == "../"


def test_output_link_replaces_extension(tmp_path: Path) -> None:
    """Links are slash-joined, relative to the root, with the new extension."""
    root = tmp_path / "pages"
    assert output_link(root / "guide" / "intro.md", root, "html") == "guide/intro.html"


def test_output_link_outside_root_keeps_full_path() -> None:
    """Files outside the root keep their full path."""
    assert output_link(Path("other/x.rhai"), Path("scripts"), "html") == "other/x.html"


def test_display_name_drops_extension() -> None:
    """Script display names are their extension-less relative path."""
    assert display_name(Path("scripts/util/math.rhai"), Path("scripts")) == "util/math"
