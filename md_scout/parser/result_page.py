# === FILE: md_scout/parser/result_page.py ===
"""Search-result page tree with mutation notifications.

A :class:`ResultPage` wraps a BeautifulSoup document and plays the part a
browser DOM plays for a content script:

* CSS-selector queries come straight from BeautifulSoup (``select`` /
  ``css.match``, both backed by soupsieve);
* every structural change made *through the page* (:meth:`append_html`,
  :meth:`append_child`, :meth:`insert_after`, :meth:`remove`) is announced
  to the registered observers as a :class:`MutationRecord`, which is what
  gives the scanner its "live" behaviour.

Changes made by poking at the soup directly are not observed, exactly like
mutations that happen before an observer is attached.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from md_scout.logger import get_logger

__all__: Sequence[str] = ("MutationRecord", "ResultPage")

_log = get_logger("page")

MutationCallback = Callable[["MutationRecord"], None]


@dataclass(slots=True)
class MutationRecord:
    """One batch of structural changes under *target*."""

    target: Tag
    added_nodes: tuple[PageElement, ...] = field(default_factory=tuple)
    removed_nodes: tuple[PageElement, ...] = field(default_factory=tuple)


class ResultPage:
    """A parsed result page plus its mutation event channel."""

    def __init__(self, html: str, url: str) -> None:
        self.url = url
        self.soup = BeautifulSoup(html, "html.parser")
        self._observers: list[MutationCallback] = []

    # Properties -------------------------------------------------------------
    @property
    def origin(self) -> str:
        parts = urlsplit(self.url)
        return urlunsplit((parts.scheme, parts.netloc, "", "", ""))

    @property
    def body(self) -> Tag:
        return self.soup.body or self.soup

    # Observers --------------------------------------------------------------
    def observe(self, callback: MutationCallback) -> Callable[[], None]:
        """Register *callback*; the returned function unregisters it."""
        self._observers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return _unsubscribe

    def _notify(self, record: MutationRecord) -> None:
        for callback in list(self._observers):
            callback(record)

    # Mutations --------------------------------------------------------------
    def append_html(self, markup: str, parent: Tag | None = None) -> list[Tag]:
        """Parse *markup* and append its top-level nodes to *parent* (default: ``<body>``).

        Returns the element nodes that were added; text nodes are appended
        as well but not returned.
        """
        target = parent if parent is not None else self.body
        fragment = BeautifulSoup(markup, "html.parser")
        added: list[PageElement] = []
        for node in list(fragment.contents):
            target.append(node.extract())
            added.append(node)
        _log.debug("Appended %d node(s) to <%s>", len(added), target.name)
        self._notify(MutationRecord(target=target, added_nodes=tuple(added)))
        return [n for n in added if isinstance(n, Tag)]

    def append_child(self, parent: Tag, node: PageElement) -> PageElement:
        parent.append(node)
        self._notify(MutationRecord(target=parent, added_nodes=(node,)))
        return node

    def insert_after(self, reference: PageElement, node: PageElement) -> PageElement:
        parent = reference.parent
        if parent is None:
            raise ValueError("reference node is detached from the document")
        reference.insert_after(node)
        self._notify(MutationRecord(target=parent, added_nodes=(node,)))
        return node

    def remove(self, node: PageElement) -> PageElement:
        parent = node.parent
        node.extract()
        if parent is not None:
            self._notify(MutationRecord(target=parent, removed_nodes=(node,)))
        return node

    # Queries ----------------------------------------------------------------
    def is_connected(self, node: PageElement) -> bool:
        """True while *node* is reachable from the document root."""
        if node is self.soup:
            return True
        return any(parent is self.soup for parent in node.parents)

    def new_tag(self, name: str, **attrs: Any) -> Tag:
        return self.soup.new_tag(name, attrs=attrs)

    def render(self) -> str:
        return str(self.soup)
