# md_scout/parser/__init__.py
"""URL classification, link resolution and the result-page tree."""
from md_scout.parser.link_resolver import resolve_target_href
from md_scout.parser.result_page import MutationRecord, ResultPage
from md_scout.parser.url_classifier import (
    github_raw_url,
    is_markdown_url,
    parse_url,
    to_raw_markdown_url,
)

__all__ = [
    "MutationRecord",
    "ResultPage",
    "github_raw_url",
    "is_markdown_url",
    "parse_url",
    "resolve_target_href",
    "to_raw_markdown_url",
]
