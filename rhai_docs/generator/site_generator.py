"""High-level orchestration for documentation site generation.

This module coordinates discovery of narrative pages and Rhai scripts,
rendering them with the shared page template, and writing the HTML tree. It
exposes :class:`SiteGenerator`, which consumes a
:class:`~rhai_docs.config.SiteConfig`, builds the navigation graph, writes the
shared assets, and renders one page per narrative page and per documented
script. Every run regenerates the whole site; identical inputs produce
identical output.

Example
-------
>>> from pathlib import Path
>>> from rhai_docs.config import load_site_config
>>> from rhai_docs.generator import SiteGenerator
>>> config = load_site_config(Path("rhai.toml"))  # doctest: +SKIP
>>> generator = SiteGenerator(
...     config,
...     scripts_root=Path("."),
...     pages_root=Path("pages"),
...     destination=Path("dist"),
... )  # doctest: +SKIP
>>> generator.run()  # doctest: +SKIP
[PosixPath('dist/styles.css'), PosixPath('dist/logo.svg'), ...]
"""

from __future__ import annotations

import logging
import typing as typ

from rhai_docs.assets import copy_stylesheet, write_icon, write_styles
from rhai_docs.script_parser import RhaiScriptParser

from .assembler import PageAssembler
from .models import SiteAssets
from .navigation import NavigationBuilder, ensure_unique_links
from .renderer import HtmlContentRenderer
from .templating import TemplateRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from rhai_docs.config import SiteConfig
    from rhai_docs.script_parser import ScriptParser

    from .models import PageRecord

logger = logging.getLogger(__name__)


class SiteGenerator:
    """Render narrative pages and script documentation into a static site."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        scripts_root: Path,
        pages_root: Path,
        destination: Path,
        skip_private: bool | None = None,
        templates_dir: Path | None = None,
        parser: ScriptParser | None = None,
    ) -> None:
        """Initialize the generator with configuration and collaborators.

        Parameters
        ----------
        config : SiteConfig
            Parsed ``rhai.toml``.
        scripts_root : Path
            Directory searched for scripts; also the base for the icon and
            custom stylesheet paths.
        pages_root : Path
            Directory searched for narrative Markdown pages.
        destination : Path
            Output directory, created when missing.
        skip_private : bool, optional
            Override for ``config.skip_private``.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        parser : ScriptParser, optional
            Script parser; defaults to :class:`RhaiScriptParser`.
        """
        self.config = config
        self.scripts_root = scripts_root
        self.pages_root = pages_root
        self.destination = destination
        self.skip_private = (
            config.skip_private if skip_private is None else skip_private
        )
        self.renderer = HtmlContentRenderer(config.code_theme)
        self.templates = TemplateRenderer(templates_dir)
        self.navigation = NavigationBuilder(
            self.renderer,
            parser or RhaiScriptParser(),
            script_extension=config.extension,
        )

    def run(self) -> list[Path]:
        """Build the whole site and return the written files in write order.

        Raises
        ------
        ScriptParseError
            When a script is malformed.
        NavigationError
            When two entries map to the same output file.
        IconError
            When the configured icon has no extension.
        OSError
            On any failed read of a required file or any failed write.

        Notes
        -----
        Nothing is cleaned up on failure; a later run regenerates the tree.
        """
        graph = self.navigation.build(
            self.pages_root,
            self.scripts_root,
            self.config.index,
            skip_private=self.skip_private,
        )
        index_link = self.navigation.index_link
        needs_index = ensure_unique_links(graph, index_link)
        logger.info(
            "Discovered %d pages and %d scripts", len(graph.pages), len(graph.scripts)
        )

        self.destination.mkdir(parents=True, exist_ok=True)
        written = [
            write_styles(self.config, self.renderer, self.templates, self.destination)
        ]
        icon = write_icon(
            self.config, self.templates, self.scripts_root, self.destination
        )
        written.append(icon)
        stylesheet = copy_stylesheet(self.config, self.scripts_root, self.destination)
        if stylesheet is not None:
            written.append(stylesheet)

        assembler = PageAssembler(
            self.config,
            self.renderer,
            self.destination,
            SiteAssets(
                icon=icon.name, stylesheet=stylesheet.name if stylesheet else None
            ),
            skip_private=self.skip_private,
        )
        for entry in graph.pages:
            body = self.renderer.markdown(graph.page_bodies[entry.source_path])
            record = assembler.assemble_page(entry, body, graph.pages, graph.scripts)
            written.append(self._write(entry.output_link, record))

        if needs_index:
            logger.info("No page claims %s; generating it", index_link)
            record = assembler.assemble_index(index_link, graph.pages, graph.scripts)
            written.append(self._write(index_link, record))

        for entry in graph.scripts:
            record = assembler.assemble_script(
                entry, graph.parsed[entry.source_path], graph.scripts, graph.pages
            )
            written.append(self._write(entry.output_link, record))
        return written

    def _write(self, link: str, record: PageRecord) -> Path:
        """Render ``record`` and write it to ``link`` below the destination."""
        path = self.destination / link
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Writing %s", path)
        path.write_text(self.templates.render_page(record), encoding="utf-8")
        return path


__all__ = ["SiteGenerator"]
