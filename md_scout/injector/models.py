# md_scout/injector/models.py
"""
Data models for the scan engine.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from bs4.element import Tag


@dataclass(slots=True)
class CandidateLink:
    """First qualifying anchor of a result container and the URL to probe."""

    container: Tag
    anchor: Tag
    href: str
    raw_url: str


@dataclass(slots=True)
class Annotation:
    """One attached affordance, as reported by the CLI."""

    #: 1-based position in attachment (probe completion) order
    order: int
    source_href: str
    markdown_url: str
    target_url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
