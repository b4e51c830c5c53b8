"""Discover pages and scripts and build the site navigation lists.

:class:`NavigationBuilder` walks the narrative-page tree and the script tree,
decides which files become pages, and returns a
:class:`~rhai_docs.generator.models.NavigationGraph` holding two ordered
lists of :class:`~rhai_docs.generator.models.NavEntry` (pages first, then
scripts) together with side tables for the page Markdown and script parse
results.

Ordering rules
--------------
* Pages are sorted by path. A configured index page moves to the front and
  is linked as ``index.<ext>`` wherever it lives in the page tree.
* Scripts follow filesystem enumeration order.

Files that cannot be read are skipped and logged; parse errors propagate.

Example
-------
>>> from pathlib import Path
>>> from rhai_docs.generator import HtmlContentRenderer, NavigationBuilder
>>> from rhai_docs.script_parser import RhaiScriptParser
>>> builder = NavigationBuilder(HtmlContentRenderer(), RhaiScriptParser())
>>> graph = builder.build(Path("pages"), Path("."))  # doctest: +SKIP
>>> [entry.output_link for entry in graph.pages]  # doctest: +SKIP
['index.html', 'guide.html']
"""

from __future__ import annotations

import logging
import typing as typ

from rhai_docs._constants import (
    INDEX_TEMPLATE,
    OUTPUT_EXTENSION,
    PAGE_EXTENSION,
    SCRIPT_EXTENSION,
)

from .models import NavEntry, NavigationGraph
from .paths import display_name, output_link

if typ.TYPE_CHECKING:
    from pathlib import Path

    from rhai_docs.script_parser import ScriptParser

    from .renderer import HtmlContentRenderer

logger = logging.getLogger(__name__)


class NavigationBuilder:
    """Build the page and script navigation lists for a site."""

    def __init__(
        self,
        renderer: HtmlContentRenderer,
        parser: ScriptParser,
        *,
        page_extension: str = PAGE_EXTENSION,
        script_extension: str = SCRIPT_EXTENSION,
        output_extension: str = OUTPUT_EXTENSION,
    ) -> None:
        """Initialize the builder with its collaborators.

        Parameters
        ----------
        renderer : HtmlContentRenderer
            Used to read the leading heading of each page.
        parser : ScriptParser
            Turns script files into function lists.
        page_extension, script_extension, output_extension : str
            File extensions (without the dot) of narrative pages, scripts,
            and rendered output.
        """
        self.renderer = renderer
        self.parser = parser
        self.page_extension = page_extension
        self.script_extension = script_extension
        self.output_extension = output_extension

    @property
    def index_link(self) -> str:
        """Return the root-level link reserved for the index page."""
        return INDEX_TEMPLATE.format(ext=self.output_extension)

    def build(
        self,
        pages_root: Path,
        scripts_root: Path,
        index_filename: str | None = None,
        *,
        skip_private: bool = True,
    ) -> NavigationGraph:
        """Discover every page and script and return the navigation graph.

        Parameters
        ----------
        pages_root : Path
            Directory searched recursively for narrative pages.
        scripts_root : Path
            Directory searched recursively for scripts.
        index_filename : str, optional
            Page (relative to ``pages_root``) pinned first and linked as
            ``index.<ext>``.
        skip_private : bool
            Leave private functions out when deciding whether a script has
            anything to document.

        Returns
        -------
        NavigationGraph
            Page entries, script entries, and their side tables.

        Raises
        ------
        ScriptParseError
            If any script is malformed.
        """
        graph = NavigationGraph(pages=[], scripts=[])
        self._add_pages(graph, pages_root, index_filename)
        self._add_scripts(graph, scripts_root, skip_private=skip_private)
        return graph

    def _discover(self, root: Path, extension: str) -> list[Path]:
        if not root.is_dir():
            logger.info("Directory %s does not exist; nothing to discover", root)
            return []
        return [path for path in root.rglob(f"*.{extension}") if path.is_file()]

    def _ordered_pages(self, pages_root: Path, index_path: Path | None) -> list[Path]:
        """Return page files sorted by path with the index page moved first."""
        files = sorted(self._discover(pages_root, self.page_extension))
        if index_path is None:
            return files
        for position, candidate in enumerate(files):
            if candidate.resolve() == index_path:
                files.insert(0, files.pop(position))
                break
        else:
            logger.info("Index page %s not found among pages", index_path)
        return files

    def _add_pages(
        self, graph: NavigationGraph, pages_root: Path, index_filename: str | None
    ) -> None:
        index_path = (pages_root / index_filename).resolve() if index_filename else None
        for path in self._ordered_pages(pages_root, index_path):
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.info("Skipping page %s: %s", path, exc)
                continue
            title = self.renderer.first_heading(text)
            if title is None:
                logger.info("Skipping page %s: no leading level-1 heading", path)
                continue
            if index_path is not None and path.resolve() == index_path:
                link = self.index_link
            else:
                link = output_link(path, pages_root, self.output_extension)
            logger.debug("Page %s -> %s (%s)", path, link, title)
            graph.pages.append(
                NavEntry(source_path=path, display_name=title, output_link=link)
            )
            graph.page_bodies[path] = text

    def _add_scripts(
        self, graph: NavigationGraph, scripts_root: Path, *, skip_private: bool
    ) -> None:
        for path in self._discover(scripts_root, self.script_extension):
            try:
                parsed = self.parser.parse(path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.info("Skipping script %s: %s", path, exc)
                continue
            functions = parsed.visible_functions(skip_private=skip_private)
            if not functions:
                logger.info("Skipping script %s: no functions to document", path)
                continue
            link = output_link(path, scripts_root, self.output_extension)
            logger.debug("Script %s -> %s (%d functions)", path, link, len(functions))
            graph.scripts.append(
                NavEntry(
                    source_path=path,
                    display_name=display_name(path, scripts_root),
                    output_link=link,
                )
            )
            graph.parsed[path] = parsed


class NavigationError(RuntimeError):
    """Raised when two navigation entries would be written to the same file."""


def ensure_unique_links(graph: NavigationGraph, index_link: str) -> bool:
    """Check that no two entries share an output link.

    Parameters
    ----------
    graph : NavigationGraph
        Graph returned by :meth:`NavigationBuilder.build`.
    index_link : str
        Root index link; reserved for the synthetic index when no page
        claims it.

    Returns
    -------
    bool
        ``True`` when a synthetic index page must be generated.

    Raises
    ------
    NavigationError
        If a link is claimed twice.
    """
    owners: dict[str, str] = {}
    for entry in graph.pages:
        _claim(owners, entry.output_link, str(entry.source_path))
    needs_index = index_link not in owners
    if needs_index:
        owners[index_link] = "the generated index page"
    for entry in graph.scripts:
        _claim(owners, entry.output_link, str(entry.source_path))
    return needs_index


def _claim(owners: dict[str, str], link: str, owner: str) -> None:
    if link in owners:
        msg = f"{owner} and {owners[link]} would both be written to '{link}'"
        raise NavigationError(msg)
    owners[link] = owner


__all__ = ["NavigationBuilder", "NavigationError", "ensure_unique_links"]
