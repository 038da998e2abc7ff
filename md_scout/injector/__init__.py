# md_scout/injector/__init__.py
"""Scan engine, HEAD probe and mutation watcher."""
from md_scout.injector.models import Annotation, CandidateLink
from md_scout.injector.probe import HeadProbe, MarkdownProbe, is_real_markdown_by_head
from md_scout.injector.scan import ScanEngine
from md_scout.injector.watcher import MutationWatcher

__all__ = [
    "Annotation",
    "CandidateLink",
    "HeadProbe",
    "MarkdownProbe",
    "MutationWatcher",
    "ScanEngine",
    "is_real_markdown_by_head",
]
