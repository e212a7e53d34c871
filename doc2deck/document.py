"""
Document tree consumed by the presentation builder.

The tree is built by whatever reader sits in front of this package; the
classes here only describe its shape.  Inline nodes live inside paragraphs,
block nodes make up the document body.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


@dataclass
class Attr:
    """Identifier, classes and key/value pairs attached to a node."""
    identifier: str = ""
    classes: List[str] = field(default_factory=list)
    attributes: List[Tuple[str, str]] = field(default_factory=list)


class MathType(Enum):
    INLINE = "inline"
    DISPLAY = "display"


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    DEFAULT = "default"


class ListNumberStyle(Enum):
    DEFAULT = "default"
    EXAMPLE = "example"
    DECIMAL = "decimal"
    LOWER_ROMAN = "lower-roman"
    UPPER_ROMAN = "upper-roman"
    LOWER_ALPHA = "lower-alpha"
    UPPER_ALPHA = "upper-alpha"


class ListNumberDelim(Enum):
    DEFAULT = "default"
    PERIOD = "period"
    ONE_PAREN = "one-paren"
    TWO_PARENS = "two-parens"


@dataclass(frozen=True)
class ListAttributes:
    """Numbering of an ordered list: first number, style and delimiter."""
    start: int = 1
    style: ListNumberStyle = ListNumberStyle.DEFAULT
    delimiter: ListNumberDelim = ListNumberDelim.DEFAULT


# ---------------------------------------------------------------------------
# Inline nodes
# ---------------------------------------------------------------------------

@dataclass
class Str:
    text: str


@dataclass
class Emph:
    content: List["Inline"] = field(default_factory=list)


@dataclass
class Strong:
    content: List["Inline"] = field(default_factory=list)


@dataclass
class Strikeout:
    content: List["Inline"] = field(default_factory=list)


@dataclass
class Superscript:
    content: List["Inline"] = field(default_factory=list)


@dataclass
class Subscript:
    content: List["Inline"] = field(default_factory=list)


@dataclass
class SmallCaps:
    content: List["Inline"] = field(default_factory=list)


@dataclass
class Space:
    pass


@dataclass
class SoftBreak:
    pass


@dataclass
class LineBreak:
    pass


@dataclass
class Link:
    content: List["Inline"]
    url: str
    title: str = ""
    attr: Attr = field(default_factory=Attr)


@dataclass
class Image:
    content: List["Inline"]
    url: str
    title: str = ""
    attr: Attr = field(default_factory=Attr)


@dataclass
class Code:
    text: str
    attr: Attr = field(default_factory=Attr)


@dataclass
class Math:
    math_type: MathType
    text: str


@dataclass
class Note:
    """Footnote; its body is a list of blocks."""
    blocks: List["Block"] = field(default_factory=list)


@dataclass
class Span:
    content: List["Inline"] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)


@dataclass
class RawInline:
    format: str
    text: str


Inline = Union[
    Str, Emph, Strong, Strikeout, Superscript, Subscript, SmallCaps,
    Space, SoftBreak, LineBreak, Link, Image, Code, Math, Note, Span, RawInline,
]


# ---------------------------------------------------------------------------
# Block nodes
# ---------------------------------------------------------------------------

@dataclass
class Plain:
    content: List[Inline] = field(default_factory=list)


@dataclass
class Para:
    content: List[Inline] = field(default_factory=list)


@dataclass
class LineBlock:
    lines: List[List[Inline]] = field(default_factory=list)


@dataclass
class CodeBlock:
    text: str
    attr: Attr = field(default_factory=Attr)


@dataclass
class RawBlock:
    format: str
    text: str


@dataclass
class BlockQuote:
    blocks: List["Block"] = field(default_factory=list)


@dataclass
class BulletList:
    items: List[List["Block"]] = field(default_factory=list)


@dataclass
class OrderedList:
    items: List[List["Block"]] = field(default_factory=list)
    attributes: ListAttributes = field(default_factory=ListAttributes)


@dataclass
class DefinitionList:
    # (term, [definition, ...]) where each definition is a block list
    entries: List[Tuple[List[Inline], List[List["Block"]]]] = field(default_factory=list)


@dataclass
class Header:
    level: int
    content: List[Inline] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)

    @property
    def identifier(self) -> str:
        return self.attr.identifier


@dataclass
class HorizontalRule:
    pass


TableCell = List["Block"]


@dataclass
class Table:
    """
    Simple table.

    ``header`` holds one cell per column; a table without a header row has
    either an empty ``header`` or one whose cells are all empty.
    """
    caption: List[Inline] = field(default_factory=list)
    alignments: List[Alignment] = field(default_factory=list)
    widths: List[float] = field(default_factory=list)
    header: List[TableCell] = field(default_factory=list)
    rows: List[List[TableCell]] = field(default_factory=list)

    def has_header(self) -> bool:
        return any(cell for cell in self.header)


@dataclass
class Div:
    blocks: List["Block"] = field(default_factory=list)
    attr: Attr = field(default_factory=Attr)

    @property
    def classes(self) -> List[str]:
        return self.attr.classes


@dataclass
class Null:
    pass


Block = Union[
    Plain, Para, LineBlock, CodeBlock, RawBlock, BlockQuote, BulletList,
    OrderedList, DefinitionList, Header, HorizontalRule, Table, Div, Null,
]

MetaValue = Union[str, List[Inline], None]


def text(value: str) -> List[Inline]:
    """Split plain text into ``Str``/``Space`` inlines."""
    inlines: List[Inline] = []
    for word in value.split():
        if inlines:
            inlines.append(Space())
        inlines.append(Str(word))
    return inlines


def meta_inlines(value: MetaValue) -> List[Inline]:
    """Normalize a metadata value (raw string or inline list) to inlines."""
    if value is None:
        return []
    if isinstance(value, str):
        return [Str(value)] if value else []
    return list(value)


@dataclass
class Meta:
    """
    Document metadata.

    Every field is either a raw string or an already-parsed inline list.
    ``notes_title`` and ``toc_title`` rename the generated notes and
    table-of-contents slides.
    """
    title: MetaValue = None
    subtitle: MetaValue = None
    authors: List[MetaValue] = field(default_factory=list)
    date: MetaValue = None
    notes_title: MetaValue = None
    toc_title: MetaValue = None


@dataclass
class Document:
    blocks: List[Block] = field(default_factory=list)
    meta: Meta = field(default_factory=Meta)


def is_list_block(block: Optional[Block]) -> bool:
    return isinstance(block, (BulletList, OrderedList, DefinitionList))
