# File: tests/conftest.py
import asyncio
from typing import Dict, List, Optional

import pytest

from md_scout.annotator import Annotator
from md_scout.config import ScoutConfig
from md_scout.injector.scan import ScanEngine
from md_scout.parser.result_page import ResultPage

GOOGLE_URL = "https://www.google.com/search?q=readme"


class FakeProbe:
    """
    In-memory stand-in for HeadProbe.

    *results* maps URL -> outcome (anything else gets *default*), *delays*
    maps URL -> seconds to sleep, and *gate*, when set, holds every probe
    until the event fires.
    """

    def __init__(
        self,
        results: Optional[Dict[str, bool]] = None,
        default: bool = True,
        delays: Optional[Dict[str, float]] = None,
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.results = results or {}
        self.default = default
        self.delays = delays or {}
        self.gate = gate
        self.calls: List[str] = []

    async def is_real_markdown(self, url: str) -> bool:
        self.calls.append(url)
        if self.gate is not None:
            await self.gate.wait()
        delay = self.delays.get(url)
        if delay:
            await asyncio.sleep(delay)
        return self.results.get(url, self.default)


def result_block(href: str, *, snippet: bool = True, cls: str = "g", extra: str = "") -> str:
    """Markup of a single search result."""
    snip = '<div class="VwiC3b">Snippet text</div>' if snippet else ""
    return f'<div class="{cls}"><a href="{href}"><h3>Title</h3></a>{extra}{snip}</div>'


def page_html(*blocks: str) -> str:
    return f'<html><body><div id="search">{"".join(blocks)}</div></body></html>'


def markers(root) -> list:
    return root.select('[data-md2pdf-button="1"]')


@pytest.fixture()
def config() -> ScoutConfig:
    """Default config pointing at a Google results page."""
    return ScoutConfig(page_url=GOOGLE_URL)


@pytest.fixture()
def probe() -> FakeProbe:
    return FakeProbe()


@pytest.fixture()
def opened() -> List[str]:
    """Collects URLs passed to the annotator's opener."""
    return []


@pytest.fixture()
def make_engine(config, probe, opened):
    """Factory: build (page, engine) for the given markup."""

    def _make(html: str, probe_override=None):
        page = ResultPage(html, config.page_url)
        annotator = Annotator(page, config, opener=opened.append)
        engine = ScanEngine(page, probe_override or probe, annotator, config)
        return page, engine

    return _make
