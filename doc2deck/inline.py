"""
Inline conversion: document inlines -> styled paragraph elements.
"""
import logging
from typing import Iterable, List

from .context import Context, ConversionState
from .document import (
    Code, Emph, Inline, LineBreak, Link, Math, Note, SmallCaps, SoftBreak,
    Space, Span, Str, Strikeout, Strong, Subscript, Superscript,
)
from .models import Break, MathElem, ParaElem, Run
from .styles import (
    SUBSCRIPT_BASELINE, SUPERSCRIPT_BASELINE, Capitals, Hyperlink, Strikethrough,
)

logger = logging.getLogger(__name__)

# Wrapper inlines that only switch on one run property for their children
_STYLE_WRAPPERS = {
    Emph: {"italics": True},
    Strong: {"bold": True},
    Strikeout: {"strikethrough": Strikethrough.SINGLE},
    Superscript: {"baseline": SUPERSCRIPT_BASELINE},
    Subscript: {"baseline": SUBSCRIPT_BASELINE},
    SmallCaps: {"capitals": Capitals.SMALL},
}


class InlineConverter:
    """
    Turns inline nodes into ``Run``/``Break``/``MathElem`` values.

    Footnotes are registered in ``state.footnotes`` the moment they are
    visited, which is what makes their ordinals follow reading order.
    """

    def __init__(self, state: ConversionState):
        self.state = state

    def convert(self, inlines: Iterable[Inline], ctx: Context) -> List[ParaElem]:
        elements: List[ParaElem] = []
        for inline in inlines:
            elements.extend(self.convert_one(inline, ctx))
        return elements

    def convert_one(self, inline: Inline, ctx: Context) -> List[ParaElem]:
        if isinstance(inline, Str):
            return [Run(ctx.run_props, inline.text)]

        changes = _STYLE_WRAPPERS.get(type(inline))
        if changes is not None:
            return self.convert(inline.content, ctx.with_run_props(**changes))

        # Slide text is re-wrapped by the renderer, so soft breaks are just spaces
        if isinstance(inline, (Space, SoftBreak)):
            return self.convert_one(Str(" "), ctx)
        if isinstance(inline, LineBreak):
            return [Break()]
        if isinstance(inline, Link):
            link_ctx = ctx.with_run_props(link=Hyperlink(inline.url, inline.title))
            return self.convert(inline.content, link_ctx)
        if isinstance(inline, Code):
            return self.convert_one(Str(inline.text), ctx.with_run_props(code=True))
        if isinstance(inline, Math):
            return [MathElem(inline.math_type, inline.text)]
        if isinstance(inline, Note):
            ordinal = self.state.footnotes.register(inline.blocks)
            logger.debug(f"Registered footnote {ordinal} on slide {ctx.slide_id}")
            return self.convert_one(Superscript([Str(str(ordinal))]), ctx)
        if isinstance(inline, Span):
            return self.convert(inline.content, ctx)

        # RawInline, images outside picture paragraphs, anything unknown
        return []
