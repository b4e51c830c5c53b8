"""Generate static HTML documentation sites for Rhai script collections.

This package exposes the CLI entry points behind the ``rhai-docs`` console
script, which renders a directory of Rhai scripts and Markdown pages into a
browsable site.

Exports
-------
- ``app``: Cyclopts application entry for the build and ``new`` commands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from rhai_docs import main
>>> main(["--dest", "site"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
