# === FILE: md_scout/injector/scan.py ===
"""Scan engine: finds Markdown links in result containers and annotates them.

The walk over a subtree is synchronous. Every qualifying container spawns
one asyncio task that probes the candidate URL and, on success, hands the
container to the :class:`~md_scout.annotator.Annotator`. The engine keeps
two identity-keyed registries:

* ``pending``   – containers whose probe is still in flight;
* ``processed`` – containers that already carry an affordance.

Both are consulted before a container is considered again, which makes
:meth:`ScanEngine.inject_buttons` idempotent no matter how often the same
subtree is re-observed.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Iterator, List, Optional

from bs4.element import Tag

from md_scout.annotator import Annotator
from md_scout.config import ScoutConfig
from md_scout.constants import ANCHOR_SELECTOR, MARKER_SELECTOR
from md_scout.injector.models import Annotation, CandidateLink
from md_scout.injector.probe import MarkdownProbe
from md_scout.logger import get_logger
from md_scout.parser.link_resolver import resolve_target_href
from md_scout.parser.result_page import ResultPage
from md_scout.parser.url_classifier import is_markdown_url, to_raw_markdown_url

__all__ = ("ScanEngine",)


class ScanEngine:
    """Idempotent, non-blocking injector of converter affordances."""

    def __init__(
        self,
        page: ResultPage,
        probe: MarkdownProbe,
        annotator: Annotator,
        config: ScoutConfig,
    ) -> None:
        self.page = page
        self.probe = probe
        self.annotator = annotator
        self.config = config
        self.annotations: List[Annotation] = []
        self.logger = get_logger("scan")
        self._container_selector = ", ".join(config.container_selectors)
        # id(tag) -> tag; holding the tag keeps its id from being reused
        self._processed: Dict[int, Tag] = {}
        self._pending: Dict[int, asyncio.Task[bool]] = {}

    # Public API -------------------------------------------------------------
    @property
    def processed_count(self) -> int:
        return len(self._processed)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def inject_buttons(self, root: Optional[Tag] = None) -> List[asyncio.Task[bool]]:
        """Scan *root* (default: the whole page) and start probes for new candidates.

        Must run inside an event loop. Returns the tasks started by this call;
        the caller may ignore them.
        """
        loop = asyncio.get_running_loop()
        scope = root if root is not None else self.page.soup
        started: List[asyncio.Task[bool]] = []

        for container in self._containers(scope):
            if self._is_claimed(container):
                continue
            candidate = self._find_candidate(container)
            if candidate is None:
                continue

            key = id(container)
            task = loop.create_task(self._verify_and_annotate(candidate))
            self._pending[key] = task
            task.add_done_callback(lambda t, key=key: self._on_done(key, t))
            started.append(task)
            self.logger.debug("Probing %s (from %s)", candidate.raw_url, candidate.href)

        return started

    async def drain(self) -> None:
        """Wait until no probe is pending, including probes started meanwhile."""
        while self._pending:
            await asyncio.gather(*list(self._pending.values()), return_exceptions=True)

    def close(self) -> None:
        """Cancel every in-flight probe."""
        for task in list(self._pending.values()):
            task.cancel()

    # Container selection ----------------------------------------------------
    def _containers(self, scope: Tag) -> Iterator[Tag]:
        if scope is not self.page.soup and scope.css.match(self._container_selector):
            yield scope
        yield from scope.select(self._container_selector)

    def _is_claimed(self, container: Tag) -> bool:
        key = id(container)
        if key in self._processed or key in self._pending:
            return True
        for parent in container.parents:
            if id(parent) in self._processed or id(parent) in self._pending:
                return True
        return container.select_one(MARKER_SELECTOR) is not None

    def _find_candidate(self, container: Tag) -> Optional[CandidateLink]:
        origin = self.page.origin
        for anchor in container.select(ANCHOR_SELECTOR):
            href = anchor.get("href")
            if isinstance(href, list):
                href = " ".join(href)
            resolved = resolve_target_href(href, origin)
            if not resolved or not resolved.startswith("http"):
                continue
            if not is_markdown_url(resolved):
                continue
            return CandidateLink(
                container=container,
                anchor=anchor,
                href=resolved,
                raw_url=to_raw_markdown_url(resolved),
            )
        return None

    # Probe completion -------------------------------------------------------
    async def _verify_and_annotate(self, candidate: CandidateLink) -> bool:
        if not await self.probe.is_real_markdown(candidate.raw_url):
            self.logger.debug("Not confirmed: %s", candidate.raw_url)
            return False

        container, anchor = candidate.container, candidate.anchor
        if not self.page.is_connected(container):
            self.logger.debug("Container detached before probe finished: %s", candidate.raw_url)
            return False
        if id(container) in self._processed or container.select_one(MARKER_SELECTOR) is not None:
            return False

        snippet = self._insertion_point(container)
        if snippet is not None:
            self.annotator.attach(snippet, candidate.raw_url)
        elif self._contains(container, anchor):
            self.annotator.attach(anchor, candidate.raw_url, after=True)
        else:
            self.logger.debug("No insertion point left for %s", candidate.raw_url)
            return False

        self._processed[id(container)] = container
        self.annotations.append(
            Annotation(
                order=len(self.annotations) + 1,
                source_href=candidate.href,
                markdown_url=candidate.raw_url,
                target_url=self.annotator.build_target_url(candidate.raw_url),
            )
        )
        self.logger.debug("Annotated %s", candidate.raw_url)
        return True

    def _insertion_point(self, container: Tag) -> Optional[Tag]:
        for selector in self.config.snippet_selectors:
            snippet = container.select_one(selector)
            if snippet is not None:
                return snippet
        return None

    @staticmethod
    def _contains(container: Tag, node: Tag) -> bool:
        return any(parent is container for parent in node.parents)

    def _on_done(self, key: int, task: asyncio.Task[bool]) -> None:
        self._pending.pop(key, None)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self.logger.error("Annotation task failed: %s", exc, exc_info=exc)
