"""Shared dataclasses used by the site generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

    from rhai_docs.config import ExternalLink
    from rhai_docs.script_parser import ParsedScript


@dc.dataclass(slots=True, frozen=True)
class SubLink:
    """In-page link to one documented function."""

    name: str
    anchor: str


@dc.dataclass(slots=True)
class NavEntry:
    """One navigable unit: a narrative page or a script.

    Attributes
    ----------
    source_path : Path
        Input file; the identity key of the entry.
    display_name : str
        Page heading text, or the script's extension-less relative path.
    output_link : str
        Slash-joined path of the rendered file relative to the site root.
    active : bool
        Set only on the copy embedded in the entry's own page.
    sub_links : list[SubLink]
        Function links, filled only on the active script entry.
    """

    source_path: Path
    display_name: str
    output_link: str
    active: bool = False
    sub_links: list[SubLink] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class FunctionRecord:
    """Render input for one documented function."""

    id: str
    signature_text: str
    is_private: bool
    body_html: str


@dc.dataclass(slots=True, frozen=True)
class NarrativeBody:
    """Body of a page rendered from a Markdown file."""

    html: str


@dc.dataclass(slots=True, frozen=True)
class ScriptBody:
    """Body of a page documenting a script's functions."""

    functions: list[FunctionRecord]


PageBody = NarrativeBody | ScriptBody


@dc.dataclass(slots=True, frozen=True)
class SiteAssets:
    """Shared asset filenames, relative to the output root."""

    icon: str
    stylesheet: str | None = None


@dc.dataclass(slots=True)
class NavigationGraph:
    """Ordered navigation lists plus the side tables needed to render them.

    ``parsed`` maps a script's source path to its parse result and
    ``page_bodies`` maps a page's source path to its Markdown text. Neither
    is copied along with the navigation lists.
    """

    pages: list[NavEntry]
    scripts: list[NavEntry]
    parsed: dict[Path, ParsedScript] = dc.field(default_factory=dict)
    page_bodies: dict[Path, str] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class PageRecord:
    """Complete render input for one output file."""

    title: str
    name: str
    root: str
    assets: SiteAssets
    body: PageBody
    page_links: list[NavEntry]
    script_links: list[NavEntry]
    external_links: list[ExternalLink]
    google_analytics: str | None = None

    def to_context(self) -> dict[str, typ.Any]:
        """Flatten the record into the context mapping used by the template."""
        match self.body:
            case NarrativeBody(html=html):
                markdown, functions = html, None
            case ScriptBody(functions=records):
                markdown, functions = None, records
        return {
            "title": self.title,
            "name": self.name,
            "root": self.root,
            "icon": self.assets.icon,
            "stylesheet": self.assets.stylesheet,
            "markdown": markdown,
            "functions": functions,
            "page_links": self.page_links,
            "script_links": self.script_links,
            "external_links": self.external_links,
            "google_analytics": self.google_analytics,
        }


__all__ = [
    "FunctionRecord",
    "NarrativeBody",
    "NavEntry",
    "NavigationGraph",
    "PageBody",
    "PageRecord",
    "ScriptBody",
    "SiteAssets",
    "SubLink",
]
