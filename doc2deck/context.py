"""
Ambient conversion context and the side registries filled while converting.

``Context`` is passed down every conversion call and is never mutated; a
child conversion that needs different formatting builds its own copy with
``with_run_props`` / ``with_para_props``.

The registries are the only shared mutable state.  They are owned by the
presentation builder and only grow while body slides are converted.
"""
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Optional, Tuple

from .diagnostics import DiagnosticLog
from .document import Block
from .styles import ParaProps, RunProps


@dataclass(frozen=True)
class Context:
    run_props: RunProps = RunProps()
    para_props: ParaProps = ParaProps()
    slide_level: int = 2
    slide_id: int = 1
    in_note_slide: bool = False

    def replace(self, **changes) -> "Context":
        return replace(self, **changes)

    def with_run_props(self, **changes) -> "Context":
        return replace(self, run_props=self.run_props.extend(**changes))

    def with_para_props(self, **changes) -> "Context":
        return replace(self, para_props=self.para_props.extend(**changes))


class FootnoteRegistry:
    """Footnote bodies keyed by their 1-based ordinal, in encounter order."""

    def __init__(self):
        self._notes: Dict[int, List[Block]] = {}
        self._sealed = False

    def register(self, blocks: List[Block]) -> int:
        if self._sealed:
            raise RuntimeError("Footnote registry is sealed; body conversion already finished")
        ordinal = max(self._notes, default=0) + 1
        self._notes[ordinal] = blocks
        return ordinal

    def seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def items(self) -> List[Tuple[int, List[Block]]]:
        return sorted(self._notes.items())

    def __getitem__(self, ordinal: int) -> List[Block]:
        return self._notes[ordinal]

    def __contains__(self, ordinal: object) -> bool:
        return ordinal in self._notes

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._notes))


class AnchorRegistry:
    """Heading identifier -> slide id of the slide the heading ended up on."""

    def __init__(self):
        self._anchors: Dict[str, int] = {}

    def register(self, identifier: str, slide_id: int) -> None:
        if identifier:
            self._anchors[identifier] = slide_id

    def get(self, identifier: str) -> Optional[int]:
        return self._anchors.get(identifier)

    def keys(self):
        return self._anchors.keys()

    def as_dict(self) -> Dict[str, int]:
        return dict(self._anchors)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._anchors

    def __len__(self) -> int:
        return len(self._anchors)


@dataclass
class ConversionState:
    footnotes: FootnoteRegistry = field(default_factory=FootnoteRegistry)
    anchors: AnchorRegistry = field(default_factory=AnchorRegistry)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def register_anchor(self, identifier: str, ctx: Context) -> None:
        self.anchors.register(identifier, ctx.slide_id)
