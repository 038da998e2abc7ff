# md_scout/annotator.py
"""
Affordance rendering: the "open in converter" button attached to a result.

The converter accepts the Markdown URL both as a ``?url=`` query parameter
and inside a ``#/?url=`` fragment (for hash-routed front ends); both decode
back to the exact URL that was probed.
"""
from __future__ import annotations

import webbrowser
from typing import Callable, Optional
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from bs4.element import Tag

from md_scout.config import ScoutConfig
from md_scout.constants import AFFORDANCE_TITLE, MARKER_ATTR
from md_scout.logger import get_logger
from md_scout.parser.result_page import ResultPage

__all__ = ("Annotator",)

#: Characters left alone by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"

_AFFORDANCE_STYLE = (
    "display: inline-block; width: 16px; height: 16px; margin-left: 6px; "
    "margin-right: 0; cursor: pointer; vertical-align: middle; "
    "user-select: none; line-height: 1;"
)
_ICON_STYLE = "display: block; border-radius: 4px;"


class Annotator:
    """Builds converter links and inserts affordances into a :class:`ResultPage`."""

    def __init__(
        self,
        page: ResultPage,
        config: ScoutConfig,
        opener: Optional[Callable[[str], object]] = None,
    ) -> None:
        self.page = page
        self.base_url = config.converter_url
        self.icon_src = config.icon_src
        self._opener = opener or webbrowser.open_new_tab
        self._log = get_logger("annotator")

    def build_target_url(self, markdown_url: str) -> str:
        parts = urlsplit(self.base_url)
        params = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != "url"]
        params.append(("url", markdown_url))
        fragment = "/?url=" + quote(markdown_url, safe=_URI_COMPONENT_SAFE)
        return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", urlencode(params), fragment))

    def create_affordance(self, markdown_url: str) -> Tag:
        button = self.page.new_tag(
            "a",
            href=self.build_target_url(markdown_url),
            target="_blank",
            rel="noopener noreferrer",
            title=AFFORDANCE_TITLE,
            style=_AFFORDANCE_STYLE,
            **{MARKER_ATTR: "1"},
        )
        icon = self.page.new_tag(
            "img",
            src=self.icon_src,
            alt="MD2PDF",
            width="16",
            height="16",
            style=_ICON_STYLE,
        )
        button.append(icon)
        return button

    def attach(self, insertion_point: Tag, markdown_url: str, *, after: bool = False) -> Tag:
        """Append the affordance to *insertion_point*, or place it right after it."""
        button = self.create_affordance(markdown_url)
        if after:
            self.page.insert_after(insertion_point, button)
        else:
            self.page.append_child(insertion_point, button)
        self._log.debug("Affordance for %s attached to <%s>", markdown_url, insertion_point.name)
        return button

    def activate(self, affordance: Tag) -> str:
        """Handle a click on *affordance*: open the converter in a new tab."""
        if affordance.get(MARKER_ATTR) != "1":
            raise ValueError("element is not an MdScout affordance")
        target = affordance["href"]
        if isinstance(target, list):
            target = " ".join(target)
        self._opener(target)
        return target
