# md_scout/parser/url_classifier.py
"""
Markdown URL classification and GitHub page → raw-content rewriting.

Nothing in this module raises on bad input: :func:`parse_url` returns ``None``
for anything that is not an absolute URL, and the predicates built on top of
it treat ``None`` as "not a Markdown resource".
"""
from __future__ import annotations

import re
from typing import List, Optional
from urllib.parse import SplitResult, urlsplit

from md_scout.constants import GITHUB_HOST, GITHUB_RAW_HOST

__all__ = ("parse_url", "is_markdown_url", "github_raw_url", "to_raw_markdown_url")

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*$")
#: Schemes that are meaningless without a host part.
_HOST_REQUIRED = frozenset({"http", "https", "ftp", "ws", "wss"})
_MD_SUFFIX = ".md"
_RAW_BASE = f"https://{GITHUB_RAW_HOST}"


def parse_url(value: Optional[str]) -> Optional[SplitResult]:
    """Parse *value* as an absolute URL, or return ``None``."""
    if not value:
        return None
    try:
        parts = urlsplit(value.strip())
        if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
            return None
        if parts.scheme.lower() in _HOST_REQUIRED and not parts.hostname:
            return None
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return None
    return parts


def _host(parts: SplitResult) -> str:
    return (parts.hostname or "").lower()


def is_markdown_url(href: Optional[str]) -> bool:
    """Return True when *href* looks like a Markdown document.

    Rules, any match wins:

    1. path ends with ``.md`` on any host;
    2. ``github.com`` ``/blob/`` view ending with ``.md``;
    3. ``raw.githubusercontent.com`` path ending with ``.md``.

    A GitHub ``/tree/`` folder URL is *not* Markdown here; it is only
    rewritten later by :func:`to_raw_markdown_url`.
    """
    parts = parse_url(href)
    if parts is None:
        return False

    path = parts.path.lower()
    host = _host(parts)

    if path.endswith(_MD_SUFFIX):
        return True
    if host == GITHUB_HOST and "/blob/" in path and path.endswith(_MD_SUFFIX):
        return True
    if host == GITHUB_RAW_HOST and path.endswith(_MD_SUFFIX):
        return True
    return False


def _segments(path: str) -> List[str]:
    return [p for p in path.split("/") if p]


def github_raw_url(url: SplitResult) -> Optional[str]:
    """
    Map a parsed ``github.com`` page URL to its raw-content counterpart.

    * ``/owner/repo``                    → ``HEAD/README.md``
    * ``/owner/repo/blob/<ref>/<file>``  → ``<ref>/<file>``
    * ``/owner/repo/tree/<ref>[/<dir>]`` → ``<ref>[/<dir>]/README.md``
    * ``/owner/repo/.../<name>.md``      → ``HEAD/...`` (best-effort guess:
      no ``blob``/``tree`` marker, so the default branch is assumed)

    Returns ``None`` for any other shape.
    """
    parts = _segments(url.path)
    if len(parts) < 2:
        return None

    owner, repo = parts[0], parts[1]
    base = f"{_RAW_BASE}/{owner}/{repo}"

    if len(parts) == 2:
        return f"{base}/HEAD/README.md"

    if parts[2] == "blob" and len(parts) >= 5:
        branch = parts[3]
        file_path = "/".join(parts[4:])
        return f"{base}/{branch}/{file_path}"

    if parts[2] == "tree" and len(parts) >= 4:
        branch = parts[3]
        file_path = f"{'/'.join(parts[4:])}/README.md" if len(parts) > 4 else "README.md"
        return f"{base}/{branch}/{file_path}"

    if parts[-1].lower().endswith(_MD_SUFFIX):
        file_path = "/".join(parts[2:])
        return f"{base}/HEAD/{file_path}"

    return None


def to_raw_markdown_url(href: str) -> str:
    """Rewrite GitHub page URLs to raw URLs; return anything else unchanged."""
    parts = parse_url(href)
    if parts is None:
        return href
    if _host(parts) == GITHUB_HOST:
        raw = github_raw_url(parts)
        if raw:
            return raw
    return href
