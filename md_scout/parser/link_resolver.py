# md_scout/parser/link_resolver.py
"""
Resolution of raw ``href`` attribute values into absolute target URLs.

Search-engine redirect wrappers (``https://www.google.<tld>/url?q=<target>``)
are unwrapped so that classification sees the real destination.
"""
from __future__ import annotations

import re
from typing import Optional
from urllib.parse import parse_qs, urljoin

from md_scout.parser.url_classifier import parse_url

__all__ = ("resolve_target_href", "is_search_redirect")

_GOOGLE_HOST_RE = re.compile(r"\.google\.")
_REDIRECT_PATH = "/url"
_REDIRECT_PARAMS = ("q", "url")
_PLAIN_HTTP_RE = re.compile(r"^http:")


def is_search_redirect(host: str, path: str) -> bool:
    """True for ``*.google.*`` hosts serving the ``/url`` redirect endpoint."""
    return bool(_GOOGLE_HOST_RE.search(host)) and path == _REDIRECT_PATH


def _redirect_target(query: str) -> Optional[str]:
    params = parse_qs(query, keep_blank_values=True)
    for name in _REDIRECT_PARAMS:
        values = params.get(name)
        if values and values[0]:
            return values[0]
    return None


def resolve_target_href(raw_href: Optional[str], origin: str) -> Optional[str]:
    """
    Turn an anchor's ``href`` into an absolute, redirect-unwrapped URL.

    *origin* is the origin of the page the anchor lives on; it is only used
    for root-relative values (``/url?q=...``, ``//host/path``).

    Returns ``None`` when the value is empty or cannot be parsed. The result
    is not guaranteed to be ``http(s)`` (``mailto:`` and friends pass
    through), callers must check the scheme themselves.
    """
    if not raw_href:
        return None

    href = raw_href
    if raw_href.startswith("/"):
        try:
            href = urljoin(origin, raw_href)
        except ValueError:
            return None

    parts = parse_url(href)
    if parts is None:
        return None

    if is_search_redirect(parts.hostname or "", parts.path):
        real_href = _redirect_target(parts.query)
        if real_href:
            href = real_href

    return _PLAIN_HTTP_RE.sub("https:", href, count=1)
