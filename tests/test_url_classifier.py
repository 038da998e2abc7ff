# File: tests/test_url_classifier.py
from urllib.parse import urlsplit

import pytest

from md_scout.parser.url_classifier import (
    github_raw_url,
    is_markdown_url,
    parse_url,
    to_raw_markdown_url,
)

RAW = "https://raw.githubusercontent.com"


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://example.com/docs/README.md", True),
        ("https://example.com/NOTES.MD", True),
        ("https://example.com/a.md?plain=1#top", True),
        ("https://github.com/acme/widgets/blob/main/docs/guide.md", True),
        ("https://raw.githubusercontent.com/acme/widgets/main/README.md", True),
        ("https://github.com/acme/widgets/tree/main/docs", False),
        ("https://github.com/acme/widgets", False),
        ("https://example.com/page.mdx", False),
        ("https://example.com/md", False),
        ("not a url", False),
        ("", False),
        (None, False),
        ("http://[::1/a.md", False),
        ("https://example.com:99999/a.md", False),
    ],
)
def test_is_markdown_url(url, expected):
    assert is_markdown_url(url) is expected


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://github.com/acme/widgets", f"{RAW}/acme/widgets/HEAD/README.md"),
        ("https://github.com/acme/widgets/", f"{RAW}/acme/widgets/HEAD/README.md"),
        (
            "https://github.com/acme/widgets/blob/main/docs/guide.md",
            f"{RAW}/acme/widgets/main/docs/guide.md",
        ),
        (
            "https://github.com/acme/widgets/tree/main/docs",
            f"{RAW}/acme/widgets/main/docs/README.md",
        ),
        ("https://github.com/acme/widgets/tree/main", f"{RAW}/acme/widgets/main/README.md"),
        (
            "https://github.com/acme/widgets/docs/guide.md",
            f"{RAW}/acme/widgets/HEAD/docs/guide.md",
        ),
        ("https://github.com/acme", None),
        ("https://github.com/", None),
        ("https://github.com/acme/widgets/issues/12", None),
        ("https://github.com/acme/widgets/blob/main", None),
    ],
)
def test_github_raw_url(url, expected):
    assert github_raw_url(urlsplit(url)) == expected


@pytest.mark.parametrize(
    "href,expected",
    [
        (
            "https://github.com/acme/widgets/blob/v1.2/README.md",
            f"{RAW}/acme/widgets/v1.2/README.md",
        ),
        ("https://github.com/acme/widgets/pulls", "https://github.com/acme/widgets/pulls"),
        ("https://example.com/a.md", "https://example.com/a.md"),
        (f"{RAW}/acme/widgets/main/README.md", f"{RAW}/acme/widgets/main/README.md"),
        ("garbage", "garbage"),
    ],
)
def test_to_raw_markdown_url(href, expected):
    assert to_raw_markdown_url(href) == expected


def test_parse_url_accepts_non_http_schemes():
    assert parse_url("mailto:someone@example.com") is not None
    assert parse_url("https:///no-host") is None
    assert parse_url("relative/path.md") is None
