"""
Slide segmentation: where one slide ends and the next begins.

``split_blocks`` cuts a flat block list into groups, one group per slide.
``blocks_to_slide`` turns a single group into the matching slide variant.
"""
import logging
from collections import deque
from dataclasses import replace
from typing import List, Optional, Tuple

from .blocks import BlockConverter, leading_image
from .context import Context, ConversionState
from .document import Block, Div, Header, HorizontalRule, Para, Table
from .models import (
    ContentSlide, ParaElem, Slide, TitleSlide, TwoColumnSlide, combine_para_elems,
)
from .styles import NOTE_SIZE

logger = logging.getLogger(__name__)


def is_columns_div(block: Block) -> bool:
    return isinstance(block, Div) and "columns" in block.classes


def is_column_div(block: Block) -> bool:
    return isinstance(block, Div) and "column" in block.classes


class SlideSegmenter:
    """Groups blocks into slides and builds each slide from its group."""

    def __init__(self, state: ConversionState, block_converter: Optional[BlockConverter] = None):
        self.state = state
        self.blocks = block_converter or BlockConverter(state)

    # ------------------------------------------------------------------
    # Splitting
    # ------------------------------------------------------------------

    def split_blocks(self, blocks: List[Block], ctx: Context) -> List[List[Block]]:
        """
        Partition ``blocks`` into slide groups.

        * a horizontal rule ends the current group;
        * a heading shallower than the slide level is a group of its own;
        * a heading at the slide level starts a new group;
        * pictures, tables and column layouts get a slide of their own,
          sharing it only with a lone slide-level heading just before them.

        Empty groups are never emitted.
        """
        level = ctx.slide_level
        groups: List[List[Block]] = []
        current: List[Block] = []
        pending = deque(blocks)

        def flush() -> None:
            if current:
                groups.append(list(current))
            current.clear()

        def close_with(block: Block) -> None:
            if (len(current) == 1 and isinstance(current[0], Header)
                    and current[0].level == level):
                groups.append([current[0], block])
                current.clear()
            else:
                flush()
                groups.append([block])

        while pending:
            block = pending.popleft()

            if isinstance(block, HorizontalRule):
                flush()
                continue

            if isinstance(block, Header):
                if block.level < level:
                    flush()
                    groups.append([block])
                elif block.level == level:
                    flush()
                    current.append(block)
                else:
                    current.append(block)
                continue

            picture = leading_image(block)
            if picture is not None:
                rest = block.content[1:]
                if rest:
                    pending.appendleft(Para(rest))
                close_with(Para([picture]))
                continue

            if isinstance(block, Table) or is_columns_div(block):
                close_with(block)
                continue

            current.append(block)

        flush()
        return groups

    # ------------------------------------------------------------------
    # Slide construction
    # ------------------------------------------------------------------

    def blocks_to_slide(self, blocks: List[Block], ctx: Context) -> Slide:
        if not blocks:
            return ContentSlide()

        first, rest = blocks[0], blocks[1:]
        level = ctx.slide_level

        if isinstance(first, Header) and first.level < level:
            self.state.register_anchor(first.identifier, ctx)
            return TitleSlide(self._header(first, ctx))

        if isinstance(first, Header) and first.level == level:
            self.state.register_anchor(first.identifier, ctx)
            header = self._header(first, ctx)
            slide = self.blocks_to_slide(rest, ctx)
            if isinstance(slide, (ContentSlide, TwoColumnSlide)):
                return replace(slide, header=header)
            return slide

        columns = self._columns(first)
        if columns is not None:
            left, right, remaining = columns
            logger.debug(f"Slide {ctx.slide_id}: two-column layout")
            for block in rest + remaining:
                self.state.diagnostics.not_rendered(block)
            return TwoColumnSlide(
                header=[],
                left=self.blocks.to_shapes(self._first_group(left.blocks, ctx), ctx),
                right=self.blocks.to_shapes(self._first_group(right.blocks, ctx), ctx),
            )

        if ctx.in_note_slide:
            ctx = ctx.with_run_props(force_size=NOTE_SIZE)
        return ContentSlide(header=[], shapes=self.blocks.to_shapes(blocks, ctx))

    def _header(self, header: Header, ctx: Context) -> List[ParaElem]:
        return combine_para_elems(self.blocks.inlines.convert(header.content, ctx))

    @staticmethod
    def _columns(block: Block) -> Optional[Tuple[Div, Div, List[Block]]]:
        if not is_columns_div(block) or len(block.blocks) < 2:
            return None
        left, right = block.blocks[0], block.blocks[1]
        if not (is_column_div(left) and is_column_div(right)):
            return None
        return left, right, block.blocks[2:]

    def _first_group(self, blocks: List[Block], ctx: Context) -> List[Block]:
        """A column holds one slide's worth of content; later groups are dropped."""
        groups = self.split_blocks(blocks, ctx)
        if not groups:
            return []
        for dropped in groups[1:]:
            for block in dropped:
                self.state.diagnostics.not_rendered(block)
        return groups[0]
