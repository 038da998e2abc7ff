# md_scout/constants.py
"""
Selectors and fixed values shared by the scanner, the annotator and the config defaults.
"""
from __future__ import annotations

from typing import Final, Tuple

#: Search result blocks (outer wrapper and classic layout).
CONTAINER_SELECTORS: Final[Tuple[str, ...]] = ("div.MjjYud", "div.g")

#: Snippet elements inside a result, by insertion priority.
SNIPPET_SELECTORS: Final[Tuple[str, ...]] = ("div.VwiC3b", "div[data-sncf]", "span.aCOpRe")

ANCHOR_SELECTOR: Final[str] = "a[href]"

#: Attribute carried by every inserted affordance.
MARKER_ATTR: Final[str] = "data-md2pdf-button"
MARKER_SELECTOR: Final[str] = f'[{MARKER_ATTR}="1"]'

CONVERTER_URL: Final[str] = "https://md2pdf.dev/"
ICON_SRC: Final[str] = "icons/icon32.png"
AFFORDANCE_TITLE: Final[str] = "Open in MD2PDF"

DEFAULT_PAGE_URL: Final[str] = "https://www.google.com/"
DEFAULT_USER_AGENT: Final[str] = "MdScout/0.1"

#: octet-stream covers hosts that label Markdown as a generic binary.
MARKDOWN_CONTENT_TYPES: Final[Tuple[str, ...]] = (
    "text/markdown",
    "text/plain",
    "application/octet-stream",
)

GITHUB_HOST: Final[str] = "github.com"
GITHUB_RAW_HOST: Final[str] = "raw.githubusercontent.com"

__all__ = [
    "CONTAINER_SELECTORS",
    "SNIPPET_SELECTORS",
    "ANCHOR_SELECTOR",
    "MARKER_ATTR",
    "MARKER_SELECTOR",
    "CONVERTER_URL",
    "ICON_SRC",
    "AFFORDANCE_TITLE",
    "DEFAULT_PAGE_URL",
    "DEFAULT_USER_AGENT",
    "MARKDOWN_CONTENT_TYPES",
    "GITHUB_HOST",
    "GITHUB_RAW_HOST",
]
