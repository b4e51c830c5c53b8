"""Cyclopts CLI entrypoint for generating Rhai documentation sites.

The ``rhai-docs`` console script defined here renders a static HTML site from
a directory of Rhai scripts and a directory of Markdown pages, and can write
a starter ``rhai.toml``. Typical usage is ``rhai-docs`` from the project
root (or in CI) and ``rhai-docs new`` once, when setting a project up.

Examples
--------
Build the site with the default layout (``./rhai.toml``, ``./pages``,
``./dist``):

>>> from rhai_docs.cli import main
>>> main([])  # doctest: +SKIP

Build into a custom directory, documenting private functions too:

>>> main(["--dir", "scripts", "--dest", "site", "--all"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from jinja2 import TemplateError
from pygments.util import ClassNotFound

from ._constants import DEFAULT_CONFIG_FILE, DEFAULT_DESTINATION, DEFAULT_PAGES_DIR
from .assets import IconError
from .config import SiteConfigError, load_site_config, write_default_config
from .generator import NavigationError, SiteGenerator
from .script_parser import ScriptParseError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

FATAL_ERRORS = (
    SiteConfigError,
    ScriptParseError,
    NavigationError,
    IconError,
    TemplateError,
    ClassNotFound,
    OSError,
)

app = App(
    name="rhai-docs",
    help="Generate HTML documentation from Rhai script files.",
    config=cyclopts.config.Env("RHAI_DOCS_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool, debug: bool, quiet: bool) -> None:
    """Map the verbosity flags onto the root logger level."""
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", force=True
    )


@app.default
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(name=["--config", "-c"], help="Configuration file")
    ] = Path(DEFAULT_CONFIG_FILE),
    all_functions: typ.Annotated[
        bool,
        Parameter(
            name=["--all", "-a"],
            negative="",
            help="Document all functions, including private ones",
        ),
    ] = False,
    directory: typ.Annotated[
        Path, Parameter(name=["--dir", "-d"], help="Rhai scripts directory")
    ] = Path("."),
    pages: typ.Annotated[
        Path,
        Parameter(name=["--pages", "-p"], help="Markdown pages directory"),
    ] = Path(DEFAULT_PAGES_DIR),
    destination: typ.Annotated[
        Path, Parameter(name=["--dest", "-D"], help="Output directory")
    ] = Path(DEFAULT_DESTINATION),
    verbose: typ.Annotated[
        bool,
        Parameter(name=["--verbose", "-v"], negative="", help="Log skipped files"),
    ] = False,
    debug: typ.Annotated[
        bool, Parameter(negative="", help="Log every generation step")
    ] = False,
    quiet: typ.Annotated[
        bool, Parameter(name=["--quiet", "-q"], negative="", help="Silent mode")
    ] = False,
) -> None:
    """Generate the documentation site.

    Parameters
    ----------
    config : Path, optional
        Configuration file; relative paths are resolved against
        ``directory``.
    all_functions : bool, optional
        Document private functions as well, regardless of ``skip_private``.
    directory : Path, optional
        Directory searched for ``*.rhai`` scripts.
    pages : Path, optional
        Directory searched for ``*.md`` pages; relative paths are resolved
        against ``directory``.
    destination : Path, optional
        Output directory.
    verbose : bool, optional
        Log files skipped during discovery.
    debug : bool, optional
        Log every generation step.
    quiet : bool, optional
        Print errors only.
    """
    _configure_logging(verbose=verbose, debug=debug, quiet=quiet)
    config_path = config if config.is_absolute() else directory / config
    pages_root = pages if pages.is_absolute() else directory / pages

    site_config = load_site_config(config_path)
    logging.getLogger(__name__).debug("Config: %s", site_config)
    generator = SiteGenerator(
        site_config,
        scripts_root=directory,
        pages_root=pages_root,
        destination=destination,
        skip_private=False if all_functions else None,
    )
    written = generator.run()
    if not quiet:
        for path in written:
            print(f"wrote {_format_path(path)}")


@app.command(help="Generate a new configuration file.")
def new(
    *,
    config: typ.Annotated[
        Path, Parameter(name=["--config", "-c"], help="Configuration file to create")
    ] = Path(DEFAULT_CONFIG_FILE),
) -> None:
    """Write a starter ``rhai.toml``; existing files are left untouched."""
    path = write_default_config(config)
    print(f"wrote {_format_path(path)}")


def main(argv: cabc.Sequence[str] | None = None) -> None:
    """Invoke the Cyclopts application behind the ``rhai-docs`` command.

    Fatal errors are reported on stderr with the offending path and cause,
    followed by exit status 1.
    """
    try:
        app(argv)
    except FATAL_ERRORS as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
