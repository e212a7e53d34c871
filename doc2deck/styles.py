"""
Run (character) and paragraph formatting for the presentation model.

All style values are frozen; "extending" a style always returns a copy so a
context handed to a child conversion can never leak back into its parent.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from pptx.enum.text import PP_ALIGN

from .document import Alignment, ListAttributes

# Baseline shifts in thousandths of a percent, as DrawingML expects them
SUPERSCRIPT_BASELINE = 30000
SUBSCRIPT_BASELINE = -25000

# Sizes are in pixels and are hardcoded until themes can drive them
BLOCK_INDENT = 100
BLOCK_QUOTE_SIZE = 20
NOTE_SIZE = 18
HEADING_SPACE_BEFORE = 30


class Strikethrough(Enum):
    NO_STRIKE = "noStrike"
    SINGLE = "sngStrike"
    DOUBLE = "dblStrike"


class Capitals(Enum):
    NONE = "none"
    SMALL = "small"
    ALL = "all"


@dataclass(frozen=True)
class Hyperlink:
    url: str
    title: str = ""

    @property
    def is_internal(self) -> bool:
        """True for ``#anchor`` links pointing at another slide."""
        return self.url.startswith("#")


@dataclass(frozen=True)
class Bullet:
    pass


@dataclass(frozen=True)
class AutoNumbering:
    attributes: ListAttributes = ListAttributes()


BulletType = Union[Bullet, AutoNumbering]


@dataclass(frozen=True)
class RunProps:
    bold: bool = False
    italics: bool = False
    strikethrough: Optional[Strikethrough] = None
    baseline: Optional[int] = None
    capitals: Optional[Capitals] = None
    link: Optional[Hyperlink] = None
    code: bool = False
    block_quote: bool = False
    force_size: Optional[int] = None

    def extend(self, **changes) -> "RunProps":
        return replace(self, **changes)


@dataclass(frozen=True)
class ParaProps:
    margin_left: Optional[int] = 0
    margin_right: Optional[int] = 0
    level: int = 0
    bullet: Optional[BulletType] = None
    align: Optional[PP_ALIGN] = None
    space_before: Optional[int] = None

    def extend(self, **changes) -> "ParaProps":
        return replace(self, **changes)


_ALIGNMENTS = {
    Alignment.LEFT: PP_ALIGN.LEFT,
    Alignment.RIGHT: PP_ALIGN.RIGHT,
    Alignment.CENTER: PP_ALIGN.CENTER,
}


def to_pp_align(alignment: Alignment) -> Optional[PP_ALIGN]:
    """Map a table column alignment to python-pptx's; ``DEFAULT`` means no override."""
    return _ALIGNMENTS.get(alignment)
