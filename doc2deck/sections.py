"""
Heading helpers shared by the presentation builder.

Slide-level inference, section nesting for the table of contents, and the
plain-text / identifier utilities the generated slides need.
"""
from dataclasses import dataclass, field, replace
from typing import Collection, List

from .document import (
    Block, BlockQuote, BulletList, Code, DefinitionList, Div, Header,
    HorizontalRule, Inline, LineBlock, LineBreak, Math, Note, OrderedList, Para,
    Plain, RawInline, SoftBreak, Space, Str, Table,
)

MAX_HEADING_LEVEL = 6


def get_slide_level(blocks: List[Block]) -> int:
    """
    Infer the slide level of a document.

    It is the shallowest heading level that is directly followed by real
    content (anything but another heading or a horizontal rule).
    """
    least = MAX_HEADING_LEVEL
    for block, following in zip(blocks, blocks[1:]):
        if (isinstance(block, Header) and block.level < least
                and not isinstance(following, (Header, HorizontalRule))):
            least = block.level
    return least


@dataclass
class Section:
    level: int
    identifier: str
    title: List[Inline]
    children: List["Section"] = field(default_factory=list)


def hierarchicalize(blocks: List[Block]) -> List[Section]:
    """Nest top-level headings into sections; non-heading blocks are dropped."""
    sections: List[Section] = []
    index = 0
    while index < len(blocks):
        block = blocks[index]
        index += 1
        if not isinstance(block, Header):
            continue
        end = index
        while end < len(blocks) and not (
                isinstance(blocks[end], Header) and blocks[end].level <= block.level):
            end += 1
        sections.append(Section(
            level=block.level,
            identifier=block.identifier,
            title=block.content,
            children=hierarchicalize(blocks[index:end]),
        ))
        index = end
    return sections


def de_note(inlines: List[Inline]) -> List[Inline]:
    """Copy of ``inlines`` with every footnote reference removed, at any depth."""
    result: List[Inline] = []
    for inline in inlines:
        if isinstance(inline, Note):
            continue
        if isinstance(getattr(inline, "content", None), list):
            inline = replace(inline, content=de_note(inline.content))
        result.append(inline)
    return result


def de_note_blocks(blocks: List[Block]) -> List[Block]:
    return [_de_note_block(block) for block in blocks]


def _de_note_block(block: Block) -> Block:
    if isinstance(block, (Plain, Para, Header)):
        return replace(block, content=de_note(block.content))
    if isinstance(block, LineBlock):
        return replace(block, lines=[de_note(line) for line in block.lines])
    if isinstance(block, (BlockQuote, Div)):
        return replace(block, blocks=de_note_blocks(block.blocks))
    if isinstance(block, (BulletList, OrderedList)):
        return replace(block, items=[de_note_blocks(item) for item in block.items])
    if isinstance(block, DefinitionList):
        return replace(block, entries=[
            (de_note(term), [de_note_blocks(d) for d in definitions])
            for term, definitions in block.entries
        ])
    if isinstance(block, Table):
        return replace(
            block,
            caption=de_note(block.caption),
            header=[de_note_blocks(cell) for cell in block.header],
            rows=[[de_note_blocks(cell) for cell in row] for row in block.rows],
        )
    return block


def stringify(inlines: List[Inline]) -> str:
    """Plain text of an inline list; footnotes contribute nothing."""
    parts: List[str] = []
    for inline in inlines:
        if isinstance(inline, Str):
            parts.append(inline.text)
        elif isinstance(inline, (Space, SoftBreak, LineBreak)):
            parts.append(" ")
        elif isinstance(inline, (Code, Math)):
            parts.append(inline.text)
        elif isinstance(inline, (Note, RawInline)):
            continue
        elif hasattr(inline, "content"):
            parts.append(stringify(inline.content))
    return "".join(parts)


def inline_list_to_identifier(inlines: List[Inline]) -> str:
    """
    Build an anchor identifier from heading text.

    Keeps letters, digits and ``_-.``, lowercases, joins words with ``-``
    and strips anything before the first letter.
    """
    kept = "".join(c for c in stringify(inlines) if c.isalnum() or c in "_-. ")
    ident = "-".join(kept.lower().split())
    for index, char in enumerate(ident):
        if char.isalpha():
            return ident[index:]
    return ""


def unique_ident(inlines: List[Inline], used: Collection[str]) -> str:
    base = inline_list_to_identifier(inlines) or "section"
    if base not in used:
        return base
    suffix = 1
    while f"{base}-{suffix}" in used:
        suffix += 1
    return f"{base}-{suffix}"
