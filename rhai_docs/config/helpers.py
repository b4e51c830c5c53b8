"""Utility helpers shared by the rhai-docs configuration loader."""

from __future__ import annotations

import typing as typ

from .models import ExternalLink, Rgb, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def _optional_str(value: object | None, *, key: str, path: Path) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{path}: '{key}' must be a string."
        raise SiteConfigError(msg)
    text = value.strip()
    return text or None


def _build_color(value: object | None, *, path: Path) -> Rgb | None:
    """Build an :class:`Rgb` from a ``[r, g, b]`` array."""
    if value is None:
        return None
    match value:
        case [int() as red, int() as green, int() as blue] if all(
            0 <= channel <= 255 for channel in (red, green, blue)
        ):
            return Rgb(red, green, blue)
        case _:
            msg = f"{path}: 'color' must be an array of three integers in 0..255."
            raise SiteConfigError(msg)


def _build_links(
    entries: object | None, *, path: Path
) -> list[ExternalLink]:
    """Build external link configurations from an array of tables."""
    links: list[ExternalLink] = []
    match entries:
        case None:
            return links
        case list() as items:
            iterable = items
        case _:
            msg = f"{path}: 'links' must be an array of tables."
            raise SiteConfigError(msg)
    for entry in iterable:
        match entry:
            case {"name": str() as name, "link": str() as link}:
                links.append(ExternalLink(name=name, link=link))
            case _:
                msg = f"{path}: 'links' entries require string 'name' and 'link'."
                raise SiteConfigError(msg)
    return links


def _as_bool(value: object | None, *, key: str, path: Path) -> bool | None:
    """Return ``value`` when it is a boolean, None when unset."""
    if value is None or isinstance(value, bool):
        return value
    msg = f"{path}: '{key}' must be a boolean."
    raise SiteConfigError(msg)


__all__ = ["_as_bool", "_build_color", "_build_links", "_optional_str"]
