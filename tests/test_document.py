"""
Test the document model query layer
"""
from a11yscan.core.document import parse


def test_missing_attribute_reads_as_empty_string():
    doc = parse('<img src="a.png">')
    img = doc.find_all("img")[0]
    assert img.attr("alt") == ""
    assert img.has_attr("alt") is False
    assert img.attr("src") == "a.png"


def test_attribute_filters():
    doc = parse('<img src="a.png" alt="A"><img src="b.png"><img src="c.png" alt="">')
    assert [i.attr("src") for i in doc.find_all("img", with_attr="alt")] == ["a.png", "c.png"]
    assert [i.attr("src") for i in doc.find_all("img", without_attr="alt")] == ["b.png"]
    assert [i.attr("src") for i in doc.find_all("img", attr_equals=("alt", "A"))] == ["a.png"]


def test_multiple_tags_in_document_order():
    doc = parse("<h2>b</h2><h1>a</h1><div><h3>c</h3></div>")
    assert [h.name for h in doc.find_all(["h1", "h2", "h3"])] == ["h2", "h1", "h3"]


def test_text_includes_descendants_and_is_trimmed():
    doc = parse("<a href='/x'>  Read <span>more</span>  </a>")
    assert doc.find_all("a")[0].text == "Read more"


def test_parent_and_closest():
    doc = parse('<a href="/"><span><img src="logo.png"></span></a>')
    img = doc.find_all("img")[0]
    assert img.parent.name == "span"
    link = img.closest(lambda el: el.name == "a")
    assert link is not None and link.attr("href") == "/"
    assert img.closest(lambda el: el.name == "table") is None


def test_top_level_element_has_no_parent():
    doc = parse("<p>hi</p>")
    assert doc.find_all("p")[0].parent is None


def test_scoped_queries():
    doc = parse("<table><tr><th>h</th></tr></table><table><tr><td>d</td></tr></table>")
    first, second = doc.find_all("table")
    assert len(first.find_all("th")) == 1
    assert second.find_all("th") == []
    assert first.first_descendant(lambda el: el.name == "th").text == "h"


def test_malformed_markup_still_parses():
    doc = parse("<div><p>unclosed <span>text</div><img src=x alt>")
    assert doc.find_all("span")[0].text == "text"
    img = doc.find_all("img")[0]
    assert img.has_attr("alt") and img.attr("alt") == ""


def test_root_and_page_text():
    doc = parse('<html lang="en"><body><p>Hello <b>world</b></p></body></html>')
    assert doc.root.attr("lang") == "en"
    assert "Hello world" in doc.text
    assert parse("<p>fragment</p>").root is None


def test_class_attribute_is_a_plain_string():
    doc = parse('<div class="a b" role="main"></div>')
    el = doc.first(lambda e: e.attr("role") == "main")
    assert el.attr("class") == "a b"
