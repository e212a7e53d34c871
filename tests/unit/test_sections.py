"""Tests for heading helpers."""

import pytest

from doc2deck.document import (
    Attr, BulletList, Code, Emph, Header, HorizontalRule, Note, Para, Str,
    Table, text,
)
from doc2deck.sections import (
    de_note, de_note_blocks, get_slide_level, hierarchicalize,
    inline_list_to_identifier, stringify, unique_ident,
)


class TestGetSlideLevel:
    def test_shallowest_heading_with_content(self):
        blocks = [Header(1, text("Title")), Header(2, text("Slide")), Para(text("body"))]
        assert get_slide_level(blocks) == 2

    def test_level_one_with_content(self):
        assert get_slide_level([Header(1, text("Intro")), Para(text("hello"))]) == 1

    def test_rule_after_heading_does_not_count(self):
        blocks = [Header(1, text("A")), HorizontalRule(), Header(3, text("B")), Para(text("x"))]
        assert get_slide_level(blocks) == 3

    def test_no_headings(self):
        assert get_slide_level([Para(text("x"))]) == 6
        assert get_slide_level([]) == 6


def test_hierarchicalize():
    blocks = [
        Para(text("preamble")),
        Header(1, text("One"), Attr("one")),
        Header(2, text("One A"), Attr("one-a")),
        Para(text("x")),
        Header(2, text("One B")),
        Header(1, text("Two"), Attr("two")),
    ]
    sections = hierarchicalize(blocks)
    assert [s.identifier for s in sections] == ["one", "two"]
    assert [c.identifier for c in sections[0].children] == ["one-a", ""]
    assert sections[0].children[0].level == 2
    assert sections[1].children == []


def test_stringify_drops_notes():
    inlines = [Emph([Str("Big")]), Str(" "), Code("idea"), Note([Para(text("n"))])]
    assert stringify(inlines) == "Big idea"


@pytest.mark.parametrize(
    "inlines,expected",
    [
        (text("Hello World"), "hello-world"),
        (text("1. Introduction!"), "introduction"),
        ([Str("snake_case"), Str(".v2")], "snake_case.v2"),
        (text("42"), ""),
    ],
)
def test_inline_list_to_identifier(inlines, expected):
    assert inline_list_to_identifier(inlines) == expected


def test_unique_ident():
    assert unique_ident(text("Notes"), set()) == "notes"
    assert unique_ident(text("Notes"), {"notes"}) == "notes-1"
    assert unique_ident(text("Notes"), {"notes", "notes-1"}) == "notes-2"
    assert unique_ident(text("!!!"), set()) == "section"


def test_de_note_removes_nested_notes():
    inlines = [Str("a"), Emph([Str("b"), Note([])]), Note([])]
    assert de_note(inlines) == [Str("a"), Emph([Str("b")])]


def test_de_note_blocks_walks_containers():
    blocks = [
        Para([Str("x"), Note([])]),
        BulletList([[Para([Note([]), Str("y")])]]),
        Table(caption=[Str("c"), Note([])], rows=[[[Para([Str("z"), Note([])])]]]),
    ]
    assert de_note_blocks(blocks) == [
        Para([Str("x")]),
        BulletList([[Para([Str("y")])]]),
        Table(caption=[Str("c")], rows=[[[Para([Str("z")])]]]),
    ]
