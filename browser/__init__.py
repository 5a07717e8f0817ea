"""Browser automation package."""

from .controller import BrowserController, ViewportSize, resolve_browser
from .helpers import get_page_title

__all__ = [
    "BrowserController",
    "ViewportSize",
    "get_page_title",
    "resolve_browser",
]
