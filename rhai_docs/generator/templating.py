"""Jinja environment wrapper used to render pages and the stylesheet."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

if typ.TYPE_CHECKING:
    from .models import PageRecord

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
PAGE_TEMPLATE = "page.html.jinja"
STYLES_TEMPLATE = "styles.css.jinja"


class TemplateRenderer:
    """Render page records and the themed stylesheet."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory holding ``page.html.jinja``, ``styles.css.jinja`` and
            the bundled ``logo.svg``. Defaults to the package templates.
        """
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "html.jinja", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_page(self, record: PageRecord) -> str:
        """Render one page; pre-rendered HTML fields are emitted verbatim."""
        html = self.env.get_template(PAGE_TEMPLATE).render(**record.to_context())
        if not html.endswith("\n"):
            html += "\n"
        return html

    def render_styles(self, **context: typ.Any) -> str:
        """Render the themed stylesheet."""
        css = self.env.get_template(STYLES_TEMPLATE).render(**context)
        if not css.endswith("\n"):
            css += "\n"
        return css

    def asset_path(self, name: str) -> Path:
        """Return the path of a static file bundled with the templates."""
        return self.templates_dir / name


__all__ = ["DEFAULT_TEMPLATES_DIR", "TemplateRenderer"]
