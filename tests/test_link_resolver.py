# File: tests/test_link_resolver.py
import pytest

from md_scout.parser.link_resolver import is_search_redirect, resolve_target_href

GOOGLE = "https://www.google.com"


@pytest.mark.parametrize(
    "raw,origin,expected",
    [
        ("/url?q=https://example.com/a.md", GOOGLE, "https://example.com/a.md"),
        ("/url?url=https://example.com/b.md", GOOGLE, "https://example.com/b.md"),
        ("/url?q=&url=https://example.com/b.md", GOOGLE, "https://example.com/b.md"),
        (
            "https://www.google.co.uk/url?q=http://example.com/a.md",
            GOOGLE,
            "https://example.com/a.md",
        ),
        ("http://example.com/a.md", GOOGLE, "https://example.com/a.md"),
        ("https://example.com/a.md", GOOGLE, "https://example.com/a.md"),
        ("/search?q=readme", GOOGLE, "https://www.google.com/search?q=readme"),
        ("//cdn.example.com/x.md", GOOGLE, "https://cdn.example.com/x.md"),
        (
            "/url?q=https://example.com/a.md",
            "https://duckduckgo.com",
            "https://duckduckgo.com/url?q=https://example.com/a.md",
        ),
        ("mailto:someone@example.com", GOOGLE, "mailto:someone@example.com"),
    ],
)
def test_resolve_target_href(raw, origin, expected):
    assert resolve_target_href(raw, origin) == expected


@pytest.mark.parametrize("raw", ["not a url", "", None, "http://[::1/x", "//[::1/x.md"])
def test_resolve_target_href_unparsable(raw):
    assert resolve_target_href(raw, GOOGLE) is None


def test_redirect_without_target_keeps_wrapper():
    href = "https://www.google.com/url?sa=t"
    assert resolve_target_href(href, GOOGLE) == href


def test_is_search_redirect():
    assert is_search_redirect("www.google.de", "/url")
    assert not is_search_redirect("www.google.de", "/url/")
    assert not is_search_redirect("google.com", "/url")
