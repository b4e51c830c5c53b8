"""Build the per-page render records from the navigation graph."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .anchors import canonical_order, function_anchor
from .comments import collect_cross_refs, translate_comment
from .models import (
    FunctionRecord,
    NarrativeBody,
    NavEntry,
    PageRecord,
    ScriptBody,
    SiteAssets,
    SubLink,
)
from .paths import root_prefix

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from rhai_docs.config import SiteConfig
    from rhai_docs.script_parser import ParsedScript

    from .models import PageBody
    from .renderer import HtmlContentRenderer

INDEX_FALLBACK_NAME = "Index"


def _clone(
    entries: cabc.Iterable[NavEntry], active: NavEntry | None = None
) -> list[NavEntry]:
    """Copy ``entries`` with only the entry matching ``active`` flagged."""
    return [
        dc.replace(
            entry,
            active=active is not None and entry.source_path == active.source_path,
            sub_links=list(entry.sub_links),
        )
        for entry in entries
    ]


class PageAssembler:
    """Turn navigation entries into :class:`PageRecord` instances."""

    def __init__(
        self,
        config: SiteConfig,
        renderer: HtmlContentRenderer,
        destination: Path,
        assets: SiteAssets,
        *,
        skip_private: bool = True,
    ) -> None:
        """Initialize the assembler.

        Parameters
        ----------
        config : SiteConfig
            Site metadata copied onto every record.
        renderer : HtmlContentRenderer
            Renders function documentation.
        destination : Path
            Output directory; root prefixes are computed relative to it.
        assets : SiteAssets
            Icon and stylesheet filenames written by the generator.
        skip_private : bool
            Leave private functions out of script pages.
        """
        self.config = config
        self.renderer = renderer
        self.destination = destination
        self.assets = assets
        self.skip_private = skip_private

    def root_for(self, link: str) -> str:
        """Return the root prefix for the page written to ``link``."""
        destination = self.destination.resolve()
        return root_prefix(destination / link, destination.parent, self.config.root)

    def assemble_page(
        self,
        entry: NavEntry,
        rendered_body: str,
        page_entries: cabc.Sequence[NavEntry],
        script_entries: cabc.Sequence[NavEntry],
    ) -> PageRecord:
        """Return the record for a narrative page."""
        return self._record(
            name=entry.display_name,
            link=entry.output_link,
            body=NarrativeBody(rendered_body),
            page_links=_clone(page_entries, entry),
            script_links=_clone(script_entries),
        )

    def assemble_script(
        self,
        entry: NavEntry,
        parsed: ParsedScript,
        script_entries: cabc.Sequence[NavEntry],
        page_entries: cabc.Sequence[NavEntry],
    ) -> PageRecord:
        """Return the record for a script page.

        Functions are listed in canonical order; the active script entry
        carries one sub-link per function.
        """
        functions = canonical_order(
            parsed.visible_functions(skip_private=self.skip_private)
        )
        cross_refs = collect_cross_refs(functions)
        records = [
            FunctionRecord(
                id=function_anchor(function),
                signature_text=function.signature(),
                is_private=function.is_private,
                body_html=self.renderer.markdown(
                    translate_comment(function.comments, cross_refs),
                    default_language=self.config.code_lang,
                    cross_refs=cross_refs,
                ),
            )
            for function in functions
        ]
        script_links = _clone(script_entries, entry)
        for link in script_links:
            if link.active:
                link.sub_links = [
                    SubLink(name=function.display(), anchor=function_anchor(function))
                    for function in functions
                ]
        return self._record(
            name=entry.display_name,
            link=entry.output_link,
            body=ScriptBody(records),
            page_links=_clone(page_entries),
            script_links=script_links,
        )

    def assemble_index(
        self,
        index_link: str,
        page_entries: cabc.Sequence[NavEntry],
        script_entries: cabc.Sequence[NavEntry],
    ) -> PageRecord:
        """Return the synthetic index record used when no page claims the root."""
        return self._record(
            name=self.config.name or INDEX_FALLBACK_NAME,
            link=index_link,
            body=NarrativeBody(""),
            page_links=_clone(page_entries),
            script_links=_clone(script_entries),
        )

    def _record(
        self,
        *,
        name: str,
        link: str,
        body: PageBody,
        page_links: list[NavEntry],
        script_links: list[NavEntry],
    ) -> PageRecord:
        return PageRecord(
            title=self.config.name,
            name=name,
            root=self.root_for(link),
            assets=self.assets,
            body=body,
            page_links=page_links,
            script_links=script_links,
            external_links=list(self.config.links),
            google_analytics=self.config.google_analytics,
        )


__all__ = ["PageAssembler"]
