# File: tests/test_result_page.py
import pytest

from md_scout.parser.result_page import MutationRecord, ResultPage


@pytest.fixture()
def page() -> ResultPage:
    return ResultPage("<html><body><div id='search'></div></body></html>", "https://www.google.com/search?q=x")


def test_origin(page):
    assert page.origin == "https://www.google.com"


def test_append_html_notifies_observers(page):
    records: list[MutationRecord] = []
    page.observe(records.append)

    added = page.append_html('<div class="g">one</div> tail text <div class="g">two</div>')

    assert [t.get_text() for t in added] == ["one", "two"]
    assert len(records) == 1
    assert records[0].target is page.body
    # text nodes are delivered too, only the return value filters them
    assert len(records[0].added_nodes) == 3
    assert all(page.is_connected(t) for t in added)


def test_append_html_into_parent(page):
    search = page.soup.select_one("#search")
    added = page.append_html("<p>x</p>", parent=search)
    assert added[0].parent is search


def test_unsubscribe_stops_notifications(page):
    records: list[MutationRecord] = []
    unsubscribe = page.observe(records.append)
    unsubscribe()
    unsubscribe()
    page.append_html("<p>x</p>")
    assert records == []


def test_remove_detaches_node(page):
    records: list[MutationRecord] = []
    node = page.append_html("<div>gone</div>")[0]
    page.observe(records.append)

    page.remove(node)

    assert not page.is_connected(node)
    assert records[0].removed_nodes == (node,)
    assert "gone" not in page.render()


def test_insert_after_detached_reference_raises(page):
    orphan = page.new_tag("span")
    with pytest.raises(ValueError):
        page.insert_after(orphan, page.new_tag("b"))


def test_page_without_body_appends_to_document():
    page = ResultPage("<div class='g'></div>", "https://www.google.com/")
    added = page.append_html("<p>x</p>")
    assert page.is_connected(added[0])
    assert page.is_connected(page.soup)
