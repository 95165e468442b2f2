"""CFS - version constants.

Keep this module tiny and dependency-free. It is imported by the codec,
the store and the settings loader, and must not have side effects.
"""

APP_NAME = "CreadorFigurasSvg"
APP_SHORT = "CFS"

# App semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"

# Canonical document header. NOTE: the header attributes are fixed on save and
# ignored on load; changing them changes every saved document.
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DOCUMENT_WIDTH = 500
DOCUMENT_HEIGHT = 500

# Default backing document (relative to CWD unless configured).
DEFAULT_DOCUMENT_NAME = "drawing.svg"
