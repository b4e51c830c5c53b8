"""Write the shared assets referenced by every generated page.

Three files sit at the root of the output directory: ``styles.css`` (the
theme stylesheet, rendered with the configured accent colour and the
Pygments rules for the configured code theme), the site icon, and an
optional custom stylesheet copied from the project.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ._constants import DEFAULT_COLOR_ALPHA, DEFAULT_ICON, ICON_STEM, STYLES_FILENAME

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .generator.renderer import HtmlContentRenderer
    from .generator.templating import TemplateRenderer

logger = logging.getLogger(__name__)


class IconError(ValueError):
    """Raised when the configured icon cannot be used."""


def write_styles(
    config: SiteConfig,
    renderer: HtmlContentRenderer,
    templates: TemplateRenderer,
    destination: Path,
) -> Path:
    """Render ``styles.css`` into ``destination`` and return its path."""
    css = templates.render_styles(
        color=config.color.css(),
        color_alpha=config.color.css_alpha(DEFAULT_COLOR_ALPHA),
        pygments_css=renderer.stylesheet,
    )
    path = destination / STYLES_FILENAME
    path.write_text(css, encoding="utf-8")
    return path


def write_icon(
    config: SiteConfig,
    templates: TemplateRenderer,
    source: Path,
    destination: Path,
) -> Path:
    """Copy the configured icon (or the bundled logo) into ``destination``.

    Parameters
    ----------
    config : SiteConfig
        ``config.icon`` is resolved relative to ``source``.
    templates : TemplateRenderer
        Provides the bundled default logo.
    source : Path
        Project directory.
    destination : Path
        Output directory.

    Returns
    -------
    Path
        Path of the written ``logo.<ext>`` file.

    Raises
    ------
    IconError
        If the configured icon has no file extension.
    OSError
        If the icon cannot be read or written.
    """
    if config.icon is None:
        icon_source = templates.asset_path(DEFAULT_ICON)
        target = destination / DEFAULT_ICON
    else:
        icon_source = source / config.icon
        extension = Path(config.icon).suffix
        if not extension:
            msg = f"Icon '{config.icon}' must have a file extension."
            raise IconError(msg)
        target = destination / f"{ICON_STEM}{extension}"
    target.write_bytes(icon_source.read_bytes())
    return target


def copy_stylesheet(config: SiteConfig, source: Path, destination: Path) -> Path | None:
    """Copy the custom stylesheet, if one is configured and present."""
    if config.stylesheet is None:
        return None
    stylesheet = source / config.stylesheet
    if not stylesheet.is_file():
        logger.info("Custom stylesheet %s not found; skipping", stylesheet)
        return None
    target = destination / stylesheet.name
    target.write_bytes(stylesheet.read_bytes())
    return target


__all__ = ["IconError", "copy_stylesheet", "write_icon", "write_styles"]
