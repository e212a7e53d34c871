"""Tests for block -> paragraph conversion."""

import logging

from doc2deck.document import (
    Attr, BlockQuote, BulletList, CodeBlock, DefinitionList, Div, Header,
    HorizontalRule, LineBlock, ListAttributes, ListNumberStyle, Null,
    OrderedList, Para, Plain, RawBlock, Str, Table, text,
)
from doc2deck.models import Break, Paragraph, Run
from doc2deck.styles import (
    BLOCK_INDENT, BLOCK_QUOTE_SIZE, HEADING_SPACE_BEFORE, AutoNumbering, Bullet,
    ParaProps, RunProps,
)


def texts(paragraphs):
    return [p.text for p in paragraphs]


def test_para_and_plain_use_ambient_para_props(block_converter, ctx):
    indented = ctx.with_para_props(margin_left=40)
    for block in (Para(text("hello there")), Plain(text("hello there"))):
        paras = block_converter.to_paragraphs(block, indented)
        assert paras == [Paragraph(ParaProps(margin_left=40), [Run(RunProps(), "hello there")])]


def test_line_block_inserts_breaks_between_lines(block_converter, ctx):
    block = LineBlock([[Str("one")], [Str("two")], [Str("three")]])
    [para] = block_converter.to_paragraphs(block, ctx)
    assert para.elements == [
        Run(RunProps(), "one"), Break(), Run(RunProps(), "two"), Break(), Run(RunProps(), "three"),
    ]


def test_code_block(block_converter, ctx):
    listed = ctx.with_para_props(level=2, bullet=Bullet())
    [para] = block_converter.to_paragraphs(CodeBlock("print(1)\nprint(2)"), listed)
    assert para.props == ParaProps(margin_left=BLOCK_INDENT)
    assert para.elements == [Run(RunProps(code=True), "print(1)\nprint(2)")]


class TestBlockQuote:
    def test_quote_indents_and_shrinks(self, block_converter, ctx):
        paras = block_converter.to_paragraphs(BlockQuote([Para([Str("quoted")])]), ctx)
        assert paras == [
            Paragraph(ParaProps(margin_left=BLOCK_INDENT), [Run(RunProps(force_size=BLOCK_QUOTE_SIZE), "quoted")])
        ]

    def test_quoted_list_is_a_plain_list(self, block_converter, ctx):
        quote = BlockQuote([
            BulletList([[Para([Str("a")])], [Para([Str("b")])]]),
            Para([Str("after")]),
        ])
        paras = block_converter.to_paragraphs(quote, ctx)
        assert texts(paras) == ["a", "b", "after"]
        assert paras[0].props.bullet == Bullet()
        assert paras[0].elements[0].props.force_size is None
        assert paras[2].props.margin_left == BLOCK_INDENT
        assert paras[2].elements[0].props.force_size == BLOCK_QUOTE_SIZE

    def test_empty_quote(self, block_converter, ctx):
        assert block_converter.to_paragraphs(BlockQuote([]), ctx) == []


def test_heading_registers_anchor_and_renders_bold(block_converter, state, ctx):
    on_slide_4 = ctx.replace(slide_id=4).with_para_props(level=3)
    header = Header(3, text("Details"), Attr("details"))
    [para] = block_converter.to_paragraphs(header, on_slide_4)
    assert para == Paragraph(ParaProps(space_before=HEADING_SPACE_BEFORE), [Run(RunProps(bold=True), "Details")])
    assert state.anchors.get("details") == 4


def test_heading_without_identifier_is_not_registered(block_converter, state, ctx):
    block_converter.to_paragraphs(Header(3, text("Anonymous")), ctx)
    assert len(state.anchors) == 0


class TestLists:
    def test_bullet_list(self, block_converter, ctx):
        block = BulletList([[Para([Str("a")])], [Para([Str("b")])]])
        paras = block_converter.to_paragraphs(block, ctx)
        expected_props = ParaProps(margin_left=None, level=1, bullet=Bullet())
        assert paras == [
            Paragraph(expected_props, [Run(RunProps(), "a")]),
            Paragraph(expected_props, [Run(RunProps(), "b")]),
        ]

    def test_ordered_list_carries_numbering(self, block_converter, ctx):
        attrs = ListAttributes(start=3, style=ListNumberStyle.LOWER_ALPHA)
        [para] = block_converter.to_paragraphs(OrderedList([[Plain([Str("x")])]], attrs), ctx)
        assert para.props.bullet == AutoNumbering(attrs)
        assert para.props.level == 1

    def test_nesting_increments_level(self, block_converter, ctx):
        block = BulletList([[Plain([Str("outer")]), OrderedList([[Plain([Str("inner")])]])]])
        outer, inner = block_converter.to_paragraphs(block, ctx)
        assert outer.props.level == 1
        assert inner.props.level == 2
        assert inner.props.bullet == AutoNumbering(ListAttributes())

    def test_only_first_paragraph_of_item_has_bullet(self, block_converter, ctx):
        block = BulletList([[Para([Str("first")]), Para([Str("second")])]])
        first, second = block_converter.to_paragraphs(block, ctx)
        assert first.props.bullet == Bullet()
        assert second.props.bullet is None
        assert second.props.level == 1

    def test_list_clears_margin_override(self, block_converter, ctx):
        quoted = BlockQuote([Para([Str("q")]), BulletList([[Plain([Str("item")])]])])
        paras = block_converter.to_paragraphs(quoted, ctx)
        assert paras[0].props.margin_left == BLOCK_INDENT
        assert paras[1].props.margin_left is None

    def test_empty_item(self, block_converter, ctx):
        assert block_converter.to_paragraphs(BulletList([[]]), ctx) == []


def test_definition_list(block_converter, ctx):
    block = DefinitionList([
        (text("Term"), [[Para(text("first def"))], [Para(text("second def"))]]),
    ])
    term, first, second = block_converter.to_paragraphs(block, ctx)
    assert term.elements == [Run(RunProps(bold=True), "Term")]
    assert first.text == "first def"
    assert second.text == "second def"
    assert first.props.margin_left == BLOCK_INDENT
    assert first.elements[0].props.force_size == BLOCK_QUOTE_SIZE


def test_notes_div_is_dropped(block_converter, ctx):
    notes = Div([Para([Str("speaker only")])], Attr(classes=["notes"]))
    assert block_converter.to_paragraphs(notes, ctx) == []


def test_other_divs_flatten(block_converter, ctx):
    div = Div([Para([Str("a")]), Div([Para([Str("b")])])], Attr(classes=["notes", "extra"]))
    assert texts(block_converter.to_paragraphs(div, ctx)) == ["a", "b"]


def test_silent_blocks(block_converter, state, ctx):
    for block in (Table(), RawBlock("html", "<hr>"), Null()):
        assert block_converter.to_paragraphs(block, ctx) == []
    assert state.diagnostics.entries == []


def test_unknown_block_reports_not_rendered(block_converter, state, ctx, caplog):
    rule = HorizontalRule()
    with caplog.at_level(logging.INFO, logger="doc2deck.diagnostics"):
        assert block_converter.to_paragraphs(rule, ctx) == []
    assert [d.block for d in state.diagnostics.entries] == [rule]
    assert "Block not rendered: HorizontalRule" in caplog.text
