"""
Data models for the presentation deck.

A ``Presentation`` is an ordered list of slides.  Each slide is one of four
variants; content slides hold shapes (text boxes, pictures, table frames)
and text boxes hold paragraphs made of styled runs.  Everything here is a
plain value: renderers read it, nothing in it knows how to serialize itself.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from .document import Attr, MathType
from .styles import Hyperlink, ParaProps, RunProps


# ---------------------------------------------------------------------------
# Paragraph content
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Break:
    """Hard line break inside a paragraph."""


@dataclass(frozen=True)
class Run:
    props: RunProps
    text: str


@dataclass(frozen=True)
class MathElem:
    math_type: MathType
    tex: str


ParaElem = Union[Break, Run, MathElem]


@dataclass(frozen=True)
class Paragraph:
    props: ParaProps = ParaProps()
    elements: List[ParaElem] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Visible text of the paragraph, breaks rendered as newlines."""
        parts = []
        for elem in self.elements:
            if isinstance(elem, Run):
                parts.append(elem.text)
            elif isinstance(elem, Break):
                parts.append("\n")
            else:
                parts.append(elem.tex)
        return "".join(parts)


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TableProps:
    has_header_row: bool = False
    has_banded_rows: bool = True


Cell = List[Paragraph]


@dataclass(frozen=True)
class Table:
    props: TableProps
    header_cells: List[Cell] = field(default_factory=list)
    rows: List[List[Cell]] = field(default_factory=list)


Graphic = Table


@dataclass(frozen=True)
class PicProps:
    link: Optional[Hyperlink] = None


@dataclass(frozen=True)
class Picture:
    props: PicProps
    path: str
    attr: Attr = field(default_factory=Attr)
    caption: List[ParaElem] = field(default_factory=list)


@dataclass(frozen=True)
class GraphicFrame:
    graphics: List[Graphic] = field(default_factory=list)
    caption: List[ParaElem] = field(default_factory=list)


@dataclass(frozen=True)
class TextBox:
    paragraphs: List[Paragraph] = field(default_factory=list)


Shape = Union[Picture, GraphicFrame, TextBox]


# ---------------------------------------------------------------------------
# Slides
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MetadataSlide:
    title: List[ParaElem] = field(default_factory=list)
    subtitle: List[ParaElem] = field(default_factory=list)
    authors: List[List[ParaElem]] = field(default_factory=list)
    date: List[ParaElem] = field(default_factory=list)


@dataclass(frozen=True)
class TitleSlide:
    header: List[ParaElem] = field(default_factory=list)


@dataclass(frozen=True)
class ContentSlide:
    header: List[ParaElem] = field(default_factory=list)
    shapes: List[Shape] = field(default_factory=list)


@dataclass(frozen=True)
class TwoColumnSlide:
    header: List[ParaElem] = field(default_factory=list)
    left: List[Shape] = field(default_factory=list)
    right: List[Shape] = field(default_factory=list)


Slide = Union[MetadataSlide, TitleSlide, ContentSlide, TwoColumnSlide]


class Presentation:
    """
    Finished deck: slides in display order plus the anchor map.

    ``anchors`` maps heading identifiers to 1-based slide numbers so a
    renderer can turn ``#identifier`` links into slide jumps.
    """

    def __init__(self, slides: List[Slide], anchors: Optional[Dict[str, int]] = None):
        self._slides = tuple(slides)
        self._anchors = dict(anchors or {})

    @property
    def slides(self) -> List[Slide]:
        return list(self._slides)

    @property
    def anchors(self) -> Dict[str, int]:
        return dict(self._anchors)

    def resolve_link(self, link: Hyperlink) -> Optional[int]:
        """Slide number an internal link points to, or ``None``."""
        if not link.is_internal:
            return None
        return self._anchors.get(link.url[1:])

    def __iter__(self) -> Iterator[Slide]:
        return iter(self._slides)

    def __len__(self) -> int:
        return len(self._slides)

    def __getitem__(self, index):
        return self._slides[index]

    def __repr__(self) -> str:
        return f"Presentation({list(self._slides)!r})"


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def combine_para_elems(elements: List[ParaElem]) -> List[ParaElem]:
    """Merge adjacent runs whose properties are identical."""
    combined: List[ParaElem] = []
    for elem in elements:
        prev = combined[-1] if combined else None
        if isinstance(elem, Run) and isinstance(prev, Run) and prev.props == elem.props:
            combined[-1] = Run(prev.props, prev.text + elem.text)
        else:
            combined.append(elem)
    return combined


def combine_shapes(shapes: List[Shape]) -> List[Shape]:
    """
    Collapse adjacent text boxes into one and drop empty text boxes.

    Pictures and graphic frames are kept where they are, so text on either
    side of them stays in separate boxes.
    """
    combined: List[Shape] = []
    for shape in shapes:
        if isinstance(shape, TextBox):
            if not shape.paragraphs:
                continue
            if combined and isinstance(combined[-1], TextBox):
                combined[-1] = TextBox(combined[-1].paragraphs + shape.paragraphs)
                continue
        combined.append(shape)
    return combined
