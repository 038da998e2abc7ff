# md_scout/injector/probe.py
"""
HEAD probe: confirms that a candidate URL really serves Markdown-like content.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Protocol, Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout

from md_scout.config import ScoutConfig
from md_scout.constants import MARKDOWN_CONTENT_TYPES
from md_scout.logger import get_logger

__all__ = ("MarkdownProbe", "HeadProbe", "is_real_markdown_by_head")

_log = get_logger("probe")


class MarkdownProbe(Protocol):
    """Anything the scan engine can ask "is this URL Markdown?"."""

    async def is_real_markdown(self, url: str) -> bool: ...


async def is_real_markdown_by_head(
    session: ClientSession,
    url: str,
    accepted: Sequence[str] = MARKDOWN_CONTENT_TYPES,
) -> bool:
    """
    Send ``HEAD url`` and check status and Content-Type.

    Returns True only for a 2xx response whose Content-Type contains one of
    *accepted*. Network errors, timeouts and invalid URLs give False; the
    coroutine never raises.
    """
    try:
        async with session.head(url, allow_redirects=True, raise_for_status=False) as resp:
            if not 200 <= resp.status < 300:
                _log.debug("HEAD %s -> HTTP %s", url, resp.status)
                return False
            ctype = resp.headers.get("Content-Type", "").lower()
    except (ClientError, asyncio.TimeoutError, ValueError) as exc:
        _log.debug("HEAD %s failed: %s", url, exc)
        return False

    confirmed = any(accepted_type in ctype for accepted_type in accepted)
    _log.debug("HEAD %s -> %r (%s)", url, ctype, "markdown" if confirmed else "rejected")
    return confirmed


class HeadProbe:
    """Owns a ClientSession and probes candidate URLs with HEAD requests."""

    def __init__(self, config: ScoutConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> HeadProbe:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.probe_timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def is_real_markdown(self, url: str) -> bool:
        if not self.session:
            raise RuntimeError("Session not initialized")
        return await is_real_markdown_by_head(self.session, url, self.config.accepted_content_types)
