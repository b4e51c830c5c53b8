"""Load and validate the ``rhai.toml`` site configuration.

This subpackage parses the project's ``rhai.toml`` file, applies defaults for
every optional key, and produces a strongly typed :class:`SiteConfig` that the
site generator consumes. The primary entry point is :func:`load_site_config`;
:func:`write_default_config` backs the ``rhai-docs new`` sub-command.

Examples
--------
>>> from pathlib import Path
>>> from rhai_docs.config import load_site_config
>>> site = load_site_config(Path("rhai.toml"))  # doctest: +SKIP
>>> site.color.css()  # doctest: +SKIP
'rgb(246, 119, 2)'
"""

from .loader import load_site_config, write_default_config
from .models import ExternalLink, Rgb, SiteConfig, SiteConfigError

__all__ = [
    "ExternalLink",
    "Rgb",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
    "write_default_config",
]
