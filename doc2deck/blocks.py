"""
Block conversion: document blocks -> paragraphs and shapes.

``to_paragraphs`` handles everything that ends up as text.  ``to_shape`` sits
one level above it and first looks for the blocks that become their own
shape (pictures and tables).
"""
import logging
from typing import List, Optional

from .context import Context, ConversionState
from .document import (
    Alignment, Block, BlockQuote, BulletList, Code, CodeBlock, DefinitionList,
    Div, Header, Image, Inline, LineBlock, LineBreak, Link,
    Null, OrderedList, Para, Plain, RawBlock, Strong, Table, TableCell,
    is_list_block,
)
from .inline import InlineConverter
from .models import (
    Cell, GraphicFrame, Paragraph, PicProps, Picture, Shape, TableProps,
    TextBox, combine_para_elems, combine_shapes,
)
from .models import Table as TableGraphic
from .styles import (
    BLOCK_INDENT, BLOCK_QUOTE_SIZE, HEADING_SPACE_BEFORE, AutoNumbering, Bullet,
    BulletType, Hyperlink, ParaProps, to_pp_align,
)

logger = logging.getLogger(__name__)


def leading_image(block: Block) -> Optional[Inline]:
    """
    Return the first inline of a paragraph if it is a picture.

    A picture is an ``Image`` or a ``Link`` whose first child is an ``Image``.
    """
    if not isinstance(block, (Plain, Para)) or not block.content:
        return None
    first = block.content[0]
    if isinstance(first, Image):
        return first
    if isinstance(first, Link) and first.content and isinstance(first.content[0], Image):
        return first
    return None


def is_notes_div(block: Block) -> bool:
    return isinstance(block, Div) and block.classes == ["notes"]


class BlockConverter:
    """Converts block nodes under an ambient ``Context``."""

    def __init__(self, state: ConversionState, inline_converter: Optional[InlineConverter] = None):
        self.state = state
        self.inlines = inline_converter or InlineConverter(state)

    # ------------------------------------------------------------------
    # Paragraphs
    # ------------------------------------------------------------------

    def blocks_to_paragraphs(self, blocks: List[Block], ctx: Context) -> List[Paragraph]:
        paragraphs: List[Paragraph] = []
        for block in blocks:
            paragraphs.extend(self.to_paragraphs(block, ctx))
        return paragraphs

    def to_paragraphs(self, block: Block, ctx: Context) -> List[Paragraph]:
        if isinstance(block, (Plain, Para)):
            return [self._paragraph(block.content, ctx)]

        if isinstance(block, LineBlock):
            joined: List[Inline] = []
            for index, line in enumerate(block.lines):
                if index:
                    joined.append(LineBreak())
                joined.extend(line)
            return [self._paragraph(joined, ctx)]

        if isinstance(block, CodeBlock):
            code_ctx = ctx.replace(para_props=ParaProps(margin_left=BLOCK_INDENT))
            return self.to_paragraphs(Para([Code(block.text, block.attr)]), code_ctx)

        if isinstance(block, BlockQuote):
            return self._block_quote(block, ctx)

        if isinstance(block, Header):
            # Only headings finer than the slide level get here; the segmenter
            # consumes the others.  Both places register anchors.
            self.state.register_anchor(block.identifier, ctx)
            elements = self.inlines.convert(block.content, ctx.with_run_props(bold=True))
            return [Paragraph(ParaProps(space_before=HEADING_SPACE_BEFORE), combine_para_elems(elements))]

        if isinstance(block, BulletList):
            return self._list(block.items, Bullet(), ctx)

        if isinstance(block, OrderedList):
            return self._list(block.items, AutoNumbering(block.attributes), ctx)

        if isinstance(block, DefinitionList):
            paragraphs: List[Paragraph] = []
            for term, definitions in block.entries:
                paragraphs.extend(self.to_paragraphs(Para([Strong(term)]), ctx))
                for definition in definitions:
                    paragraphs.extend(self.to_paragraphs(BlockQuote(definition), ctx))
            return paragraphs

        if is_notes_div(block):
            return []

        if isinstance(block, Div):
            return self.blocks_to_paragraphs(block.blocks, ctx)

        # Tables are owned by the shape layer; raw blocks have no slide rendering
        if isinstance(block, (Table, RawBlock, Null)):
            return []

        self.state.diagnostics.not_rendered(block)
        return []

    def _paragraph(self, inlines: List[Inline], ctx: Context) -> Paragraph:
        elements = self.inlines.convert(inlines, ctx)
        return Paragraph(ctx.para_props, combine_para_elems(elements))

    def _block_quote(self, block: BlockQuote, ctx: Context) -> List[Paragraph]:
        # A quoted list is how incremental lists are written; render it as a
        # plain list since incremental reveal is not supported.
        if block.blocks and is_list_block(block.blocks[0]):
            first, rest = block.blocks[0], block.blocks[1:]
            return self.to_paragraphs(first, ctx) + self.to_paragraphs(BlockQuote(rest), ctx)

        quote_ctx = ctx.replace(
            para_props=ctx.para_props.extend(margin_left=BLOCK_INDENT),
            run_props=ctx.run_props.extend(force_size=BLOCK_QUOTE_SIZE),
        )
        return self.blocks_to_paragraphs(block.blocks, quote_ctx)

    def _list(self, items: List[List[Block]], bullet: BulletType, ctx: Context) -> List[Paragraph]:
        list_ctx = ctx.replace(
            para_props=ctx.para_props.extend(
                level=ctx.para_props.level + 1,
                bullet=bullet,
                margin_left=None,
            ),
        )
        paragraphs: List[Paragraph] = []
        for item in items:
            paragraphs.extend(self._list_item(item, list_ctx))
        return paragraphs

    def _list_item(self, blocks: List[Block], ctx: Context) -> List[Paragraph]:
        """Only the first block of an item carries the bullet."""
        if not blocks:
            return []
        first = self.to_paragraphs(blocks[0], ctx)
        rest = self.blocks_to_paragraphs(blocks[1:], ctx.with_para_props(bullet=None))
        return first + rest

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def to_shape(self, block: Block, ctx: Context) -> Shape:
        picture = leading_image(block)
        if picture is not None:
            return self._picture(picture, ctx)

        if isinstance(block, Table):
            return self._table(block, ctx)

        return TextBox(self.to_paragraphs(block, ctx))

    def to_shapes(self, blocks: List[Block], ctx: Context) -> List[Shape]:
        return combine_shapes([self.to_shape(block, ctx) for block in blocks])

    def _picture(self, inline: Inline, ctx: Context) -> Picture:
        props = PicProps()
        image = inline
        if isinstance(inline, Link):
            props = PicProps(link=Hyperlink(inline.url, inline.title))
            image = inline.content[0]
        caption = combine_para_elems(self.inlines.convert(image.content, ctx))
        logger.debug(f"Picture shape for {image.url} on slide {ctx.slide_id}")
        return Picture(props, image.url, image.attr, caption)

    def _table(self, table: Table, ctx: Context) -> GraphicFrame:
        caption = combine_para_elems(self.inlines.convert(table.caption, ctx))
        header = self._row(table.alignments, table.header, ctx)
        rows = [self._row(table.alignments, row, ctx) for row in table.rows]
        props = TableProps(has_header_row=table.has_header(), has_banded_rows=True)
        return GraphicFrame([TableGraphic(props, header, rows)], caption)

    def _row(self, alignments: List[Alignment], cells: List[TableCell], ctx: Context) -> List[Cell]:
        row: List[Cell] = []
        for index, cell in enumerate(cells):
            alignment = alignments[index] if index < len(alignments) else Alignment.DEFAULT
            row.append(self._cell(alignment, cell, ctx))
        return row

    def _cell(self, alignment: Alignment, blocks: TableCell, ctx: Context) -> Cell:
        align = to_pp_align(alignment)
        return [
            Paragraph(para.props.extend(align=align), para.elements)
            for para in self.blocks_to_paragraphs(blocks, ctx)
        ]
