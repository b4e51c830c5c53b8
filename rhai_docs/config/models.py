"""Typed dataclasses describing the rhai-docs site configuration."""

from __future__ import annotations

import dataclasses as dc

from rhai_docs._constants import (
    DEFAULT_CODE_LANG,
    DEFAULT_CODE_THEME,
    DEFAULT_COLOR,
    SCRIPT_EXTENSION,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class Rgb:
    """Accent colour used by the generated stylesheet."""

    red: int
    green: int
    blue: int

    def css(self) -> str:
        """Return the colour as a CSS ``rgb()`` value."""
        return f"rgb({self.red}, {self.green}, {self.blue})"

    def css_alpha(self, alpha: int) -> str:
        """Return the colour with ``alpha`` (0-255) as a CSS ``rgba()`` value."""
        return f"rgba({self.red}, {self.green}, {self.blue}, {alpha / 255})"


@dc.dataclass(slots=True, frozen=True)
class ExternalLink:
    """Link rendered in the header of every page."""

    name: str
    link: str


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved ``rhai.toml`` definition."""

    name: str = ""
    color: Rgb = dc.field(default_factory=lambda: Rgb(*DEFAULT_COLOR))
    icon: str | None = None
    stylesheet: str | None = None
    code_theme: str = DEFAULT_CODE_THEME
    code_lang: str = DEFAULT_CODE_LANG
    root: str | None = None
    index: str | None = None
    extension: str = SCRIPT_EXTENSION
    links: list[ExternalLink] = dc.field(default_factory=list)
    google_analytics: str | None = None
    skip_private: bool = True


__all__ = ["ExternalLink", "Rgb", "SiteConfig", "SiteConfigError"]
