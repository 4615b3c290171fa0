"""Unit tests for markup escaping and tag stripping."""

from __future__ import annotations

from prooftext.text.markup import escape_html, escape_xml, filter_xml


def test_escape_xml_and_html() -> None:
    """Escaping handles `&` first so replacements are not escaped twice."""

    assert escape_xml("foo bar") == "foo bar"
    assert escape_xml('!ä"<>&&') == "!ä&quot;&lt;&gt;&amp;&amp;"
    assert escape_html('!ä"<>&&') == "!ä&quot;&lt;&gt;&amp;&amp;"


def test_escape_xml_does_not_touch_existing_text_twice() -> None:
    """Existing entities are treated as plain text and escaped again."""

    assert escape_xml("&lt;") == "&amp;lt;"


def test_filter_xml() -> None:
    """Tags are removed while text content is kept."""

    assert filter_xml("test") == "test"
    assert filter_xml("<<test>>") == "<<test>>"
    assert filter_xml("<b>test</b>") == "test"
    assert filter_xml("A sentence with a <em>test</em>") == "A sentence with a test"
    assert filter_xml('<a href="x">link</a> text') == "link text"
