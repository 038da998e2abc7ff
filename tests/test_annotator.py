# File: tests/test_annotator.py
from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from md_scout.annotator import Annotator
from md_scout.config import ScoutConfig
from md_scout.parser.result_page import ResultPage

MD_URL = "https://raw.githubusercontent.com/acme/widgets/HEAD/README.md"
ENCODED = "https%3A%2F%2Fraw.githubusercontent.com%2Facme%2Fwidgets%2FHEAD%2FREADME.md"


@pytest.fixture()
def page() -> ResultPage:
    return ResultPage(
        '<html><body><div class="g"><a href="https://x.test/a.md">A</a><div class="VwiC3b">s</div></div></body></html>',
        "https://www.google.com/",
    )


@pytest.fixture()
def annotator(page, config, opened) -> Annotator:
    return Annotator(page, config, opener=opened.append)


def test_build_target_url(annotator):
    assert annotator.build_target_url(MD_URL) == f"https://md2pdf.dev/?url={ENCODED}#/?url={ENCODED}"


def test_target_url_round_trips_query_and_fragment(annotator):
    md_url = "https://example.com/docs/a b&c.md?x=1"
    parts = urlsplit(annotator.build_target_url(md_url))

    assert parse_qs(parts.query)["url"] == [md_url]
    assert parts.fragment.startswith("/?url=")
    assert unquote(parts.fragment[len("/?url="):]) == md_url


def test_build_target_url_keeps_base_query(page, opened):
    cfg = ScoutConfig(converter_url="https://convert.example/app?lang=en&url=old")
    target = Annotator(page, cfg, opener=opened.append).build_target_url(MD_URL)
    query = parse_qs(urlsplit(target).query)
    assert query == {"lang": ["en"], "url": [MD_URL]}


def test_create_affordance_markup(annotator):
    button = annotator.create_affordance(MD_URL)
    html = str(button)

    assert button.name == "a"
    assert button["data-md2pdf-button"] == "1"
    assert button["target"] == "_blank"
    assert 'rel="noopener noreferrer"' in html
    assert button["title"] == "Open in MD2PDF"
    img = button.find("img")
    assert img["src"] == "icons/icon32.png"
    assert img["alt"] == "MD2PDF"


def test_attach_appends_to_snippet(page, annotator):
    snippet = page.soup.select_one("div.VwiC3b")
    button = annotator.attach(snippet, MD_URL)
    assert snippet.contents[-1] is button


def test_attach_after_anchor(page, annotator):
    anchor = page.soup.select_one("a")
    button = annotator.attach(anchor, MD_URL, after=True)
    assert anchor.next_sibling is button


def test_activate_opens_target(annotator, opened):
    button = annotator.create_affordance(MD_URL)
    target = annotator.activate(button)
    assert opened == [target]
    assert target == annotator.build_target_url(MD_URL)


def test_activate_rejects_foreign_element(page, annotator):
    with pytest.raises(ValueError):
        annotator.activate(page.soup.select_one("a"))
