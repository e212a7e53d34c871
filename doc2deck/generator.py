#!/usr/bin/env python3
"""
Presentation builder that ties together segmentation, block and inline conversion.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from .context import AnchorRegistry, Context, ConversionState, FootnoteRegistry
from .diagnostics import BlockNotRendered
from .document import (
    Attr, Block, BulletList, Document, Header, Inline, Link, Meta, Para, Plain, Space,
    Str, meta_inlines, text,
)
from .inline import InlineConverter
from .models import MetadataSlide, ParaElem, Presentation, Slide, combine_para_elems
from .options import ConversionOptions
from .sections import Section, de_note, de_note_blocks, get_slide_level, hierarchicalize, unique_ident
from .segmenter import SlideSegmenter

logger = logging.getLogger(__name__)

DEFAULT_NOTES_TITLE = "Notes"
DEFAULT_TOC_TITLE = "Table of Contents"


class PresentationBuilder:
    """
    Main class for turning a document tree into a :class:`Presentation`.

    The builder owns the footnote and anchor registries.  They are filled
    while body slides are converted and read back afterwards to produce the
    table-of-contents and notes slides; after :meth:`build` they stay
    available for inspection together with the collected diagnostics.
    """

    def __init__(self, options: Optional[ConversionOptions] = None):
        """
        Create a new builder.

        Args:
            options: Conversion options; defaults infer the slide level and
                skip the table of contents.
        """
        self.options = options or ConversionOptions()
        self._reset()

    def _reset(self) -> None:
        self.state = ConversionState()
        self.segmenter = SlideSegmenter(self.state)

    @property
    def inlines(self) -> InlineConverter:
        return self.segmenter.blocks.inlines

    @property
    def footnotes(self) -> FootnoteRegistry:
        return self.state.footnotes

    @property
    def anchors(self) -> AnchorRegistry:
        return self.state.anchors

    @property
    def diagnostics(self) -> List[BlockNotRendered]:
        return list(self.state.diagnostics.entries)

    def build(self, document: Document) -> Presentation:
        """
        Convert ``document`` into a presentation.

        Slide numbers are reserved up front (metadata slide, then the table
        of contents, then the body, then the notes slide) so anchors point at
        the final position of each slide.

        Args:
            document: Document tree and metadata to convert

        Returns:
            Presentation: slides in display order
        """
        self._reset()
        blocks = document.blocks
        meta = document.meta

        slide_level = self.options.slide_level or get_slide_level(blocks)
        base_ctx = Context(slide_level=slide_level)
        logger.debug(f"Slide level: {slide_level}")

        metadata_slides = []
        metadata_slide = self._metadata_slide(meta, base_ctx)
        if metadata_slide is not None:
            metadata_slides.append(metadata_slide)

        toc_start = 1 + len(metadata_slides)
        toc_length = 1 if self.options.include_toc else 0
        body_start = toc_start + toc_length

        body_slides: List[Slide] = []
        for slide_id, group in enumerate(self.segmenter.split_blocks(blocks, base_ctx), start=body_start):
            slide = self.segmenter.blocks_to_slide(group, base_ctx.replace(slide_id=slide_id))
            logger.debug(f"Built slide {slide_id}: {type(slide).__name__}")
            body_slides.append(slide)

        # Body conversion is over; the registries are only read from here on
        self.state.footnotes.seal()
        notes_start = body_start + len(body_slides)
        notes_blocks = self._notes_slide_blocks(meta, slide_level)

        notes_slides: List[Slide] = []
        if notes_blocks:
            notes_ctx = base_ctx.replace(slide_id=notes_start, in_note_slide=True)
            notes_slides.append(self.segmenter.blocks_to_slide(notes_blocks, notes_ctx))

        # The notes slide is built first so its heading anchor is registered
        # before the table of contents links to it.
        toc_slides: List[Slide] = []
        if self.options.include_toc:
            toc_ctx = base_ctx.replace(slide_id=toc_start)
            toc_slides.append(self._toc_slide(blocks + notes_blocks, meta, toc_ctx))

        slides = metadata_slides + toc_slides + body_slides + notes_slides
        logger.info(
            f"Built {len(slides)} slides ({len(body_slides)} body, "
            f"{len(self.state.footnotes)} footnotes, {len(self.state.diagnostics)} blocks not rendered)"
        )
        return Presentation(slides, self.state.anchors.as_dict())

    # ------------------------------------------------------------------
    # Metadata slide
    # ------------------------------------------------------------------

    def _convert(self, inlines, ctx: Context) -> List[ParaElem]:
        return combine_para_elems(self.inlines.convert(inlines, ctx))

    def _metadata_slide(self, meta: Meta, ctx: Context) -> Optional[MetadataSlide]:
        title = self._convert(meta_inlines(meta.title), ctx)
        subtitle = self._convert(meta_inlines(meta.subtitle), ctx)
        authors = [self._convert(meta_inlines(author), ctx) for author in meta.authors]
        date = self._convert(meta_inlines(meta.date), ctx)
        if not (title or subtitle or authors or date):
            return None
        return MetadataSlide(title=title, subtitle=subtitle, authors=authors, date=date)

    # ------------------------------------------------------------------
    # Notes slide
    # ------------------------------------------------------------------

    def _notes_slide_blocks(self, meta: Meta, slide_level: int) -> List[Block]:
        """
        Blocks of the footnotes slide: a heading plus one entry per footnote.

        These stay blocks (rather than a finished slide) so the table of
        contents can list the notes heading like any other section.
        """
        footnotes = self.state.footnotes
        if not len(footnotes):
            return []

        title = _slide_title(
            self.options.notes_title_inlines(), meta_inlines(meta.notes_title), DEFAULT_NOTES_TITLE,
        )
        ident = unique_ident(title, self.state.anchors.keys())
        notes_blocks: List[Block] = [Header(slide_level, title, Attr(ident))]
        for ordinal, note in footnotes.items():
            # Footnotes inside footnotes would need a registry that is already closed
            notes_blocks.extend(make_note_entry(ordinal, de_note_blocks(note)))
        return notes_blocks

    # ------------------------------------------------------------------
    # Table of contents
    # ------------------------------------------------------------------

    def _toc_slide(self, blocks: List[Block], meta: Meta, ctx: Context) -> Slide:
        items = [self._toc_item(section) for section in hierarchicalize(blocks)]
        title = _slide_title(
            self.options.toc_title_inlines(), meta_inlines(meta.toc_title), DEFAULT_TOC_TITLE,
        )
        header = Header(ctx.slide_level, title)
        return self.segmenter.blocks_to_slide([header, BulletList(items)], ctx)

    def _toc_item(self, section: Section) -> List[Block]:
        title = de_note(section.title)
        if section.identifier in self.state.anchors:
            entry = [Link(title, f"#{section.identifier}")]
        else:
            entry = title

        children: List[List[Block]] = []
        if section.children and section.level < self.options.toc_depth:
            children = [self._toc_item(child) for child in section.children]
        return [Plain(entry), BulletList(children)]


def _slide_title(override: List[Inline], from_meta: List[Inline], default: str) -> List[Inline]:
    # Footnotes are closed by the time these slides are built
    return de_note(override) or de_note(from_meta) or text(default)


def make_note_entry(ordinal: int, blocks: List[Block]) -> List[Block]:
    """Prefix a footnote body with its ``N.`` marker."""
    marker = Str(f"{ordinal}.")
    if blocks and isinstance(blocks[0], (Para, Plain)):
        first = blocks[0]
        return [replace(first, content=[marker, Space()] + first.content)] + blocks[1:]
    return [Para([marker])] + blocks


def document_to_presentation(document: Document, options: Optional[ConversionOptions] = None) -> Presentation:
    """Convert ``document`` with a fresh :class:`PresentationBuilder`."""
    return PresentationBuilder(options).build(document)
