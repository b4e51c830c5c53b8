"""Common literal values used across rhai_docs.

These constants keep filenames, extensions, and defaults centralized so the
CLI, generators, and tests can import the same values without drifting.
Intended for internal use within the rhai_docs package.

Examples
--------
>>> from rhai_docs import _constants
>>> _constants.INDEX_TEMPLATE.format(ext=_constants.OUTPUT_EXTENSION)
'index.html'
"""

DEFAULT_CONFIG_FILE = "rhai.toml"
DEFAULT_PAGES_DIR = "pages"
DEFAULT_DESTINATION = "dist"

PAGE_EXTENSION = "md"
SCRIPT_EXTENSION = "rhai"
OUTPUT_EXTENSION = "html"
INDEX_TEMPLATE = "index.{ext}"

DEFAULT_COLOR = (246, 119, 2)
DEFAULT_COLOR_ALPHA = 45
DEFAULT_CODE_THEME = "monokai"
DEFAULT_CODE_LANG = "rust"

STYLES_FILENAME = "styles.css"
ICON_STEM = "logo"
DEFAULT_ICON = "logo.svg"
