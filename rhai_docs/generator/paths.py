"""Output-link and root-prefix computation for generated pages."""

from __future__ import annotations

from pathlib import Path, PurePath


def output_link(path: Path, root: Path, extension: str) -> str:
    """Return the slash-joined link of ``path`` relative to ``root``.

    The extension is replaced with ``extension``. Files outside ``root``
    keep their full path.

    >>> output_link(Path("pages/guide/intro.md"), Path("pages"), "html")
    'guide/intro.html'
    """
    try:
        relative = path.relative_to(root)
    except ValueError:
        relative = path
    return relative.with_suffix(f".{extension}").as_posix()


def display_name(path: Path, root: Path) -> str:
    """Return the extension-less, slash-joined path of a script below ``root``."""
    try:
        relative = path.relative_to(root)
    except ValueError:
        relative = path
    return relative.with_suffix("").as_posix()


def root_prefix(
    output_path: PurePath, site_root: PurePath, explicit_root: str | None = None
) -> str:
    """Return the relative prefix from ``output_path`` back to the site root.

    Parameters
    ----------
    output_path : PurePath
        Path of the rendered file.
    site_root : PurePath
        Directory the depth is measured from. Callers pass the parent of the
        output directory, so ``<dest>/index.html`` has depth 2.
    explicit_root : str, optional
        Fixed prefix used for every page when the site is mounted under a
        URL sub-path.

    Returns
    -------
    str
        ``""`` for depth 1 and 2, otherwise ``"../"`` repeated ``depth - 2``
        times.

    >>> root_prefix(PurePath("site/a/b.html"), PurePath("."))
    '../'
    """
    if explicit_root is not None:
        return explicit_root
    try:
        depth = len(output_path.relative_to(site_root).parts)
    except ValueError:
        depth = len(output_path.parts)
    if depth <= 1:
        return ""
    return "../" * (depth - 2)


__all__ = ["display_name", "output_link", "root_prefix"]
