# md_scout/injector/watcher.py
"""
Mutation watcher: re-runs the scan on every subtree added to the page.
"""
from __future__ import annotations

from typing import Callable, Optional

from bs4.element import Tag

from md_scout.injector.scan import ScanEngine
from md_scout.logger import get_logger
from md_scout.parser.result_page import MutationRecord, ResultPage

__all__ = ("MutationWatcher",)

_log = get_logger("watcher")


class MutationWatcher:
    """Feeds each added element node to :meth:`ScanEngine.inject_buttons`.

    Only the added subtree is scanned, so the cost of a mutation batch is
    proportional to what was added, not to the size of the page.
    """

    def __init__(self, page: ResultPage, engine: ScanEngine) -> None:
        self.page = page
        self.engine = engine
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def observing(self) -> bool:
        return self._unsubscribe is not None

    def observe(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.page.observe(self._on_mutation)

    def disconnect(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_mutation(self, record: MutationRecord) -> None:
        for node in record.added_nodes:
            if isinstance(node, Tag):
                _log.debug("Scanning added <%s>", node.name)
                self.engine.inject_buttons(node)
