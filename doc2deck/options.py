"""Conversion options."""
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional

from .document import Inline, MetaValue, meta_inlines

DEFAULT_TOC_DEPTH = 3

# Alternate spellings accepted by ``ConversionOptions.from_mapping``
_ALIASES = {
    "slide_split_level": "slide_level",
    "slidesplitlevel": "slide_level",
    "slidelevel": "slide_level",
    "toc": "include_toc",
    "table_of_contents": "include_toc",
    "includetableofcontents": "include_toc",
    "includetoc": "include_toc",
    "tocdepth": "toc_depth",
    "notestitle": "notes_title",
    "notes_title_override": "notes_title",
    "notestitleoverride": "notes_title",
    "toctitle": "toc_title",
    "toc_title_override": "toc_title",
    "toctitleoverride": "toc_title",
}


def _normalize_key(key: str) -> str:
    key = key.replace("-", "_")
    if key in _FIELD_NAMES:
        return key
    return _ALIASES.get(key, _ALIASES.get(key.lower().replace("_", ""), key))


@dataclass
class ConversionOptions:
    """
    Options for :class:`~doc2deck.generator.PresentationBuilder`.

    Args:
        slide_level: Heading level that starts a new slide.  ``None`` infers
            it from the document's heading structure.
        include_toc: Add a table-of-contents slide after the metadata slide.
        toc_depth: Deepest heading level listed in the table of contents.
        notes_title: Title of the footnotes slide (inlines or plain text).
        toc_title: Title of the table-of-contents slide.
    """
    slide_level: Optional[int] = None
    include_toc: bool = False
    toc_depth: int = DEFAULT_TOC_DEPTH
    notes_title: MetaValue = None
    toc_title: MetaValue = None

    def notes_title_inlines(self) -> List[Inline]:
        return meta_inlines(self.notes_title)

    def toc_title_inlines(self) -> List[Inline]:
        return meta_inlines(self.toc_title)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ConversionOptions":
        """
        Build options from a plain mapping (e.g. parsed YAML or JSON).

        Keys may be snake_case, kebab-case or camelCase.

        Raises:
            ValueError: For unknown keys or levels that are not positive integers.
        """
        values: Dict[str, Any] = {}
        for key, value in mapping.items():
            name = _normalize_key(key)
            if name not in _FIELD_NAMES:
                raise ValueError(f"Unknown conversion option: {key}")
            values[name] = value

        for name in ("slide_level", "toc_depth"):
            value = values.get(name)
            if value is None:
                values.pop(name, None)
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if "include_toc" in values:
            values["include_toc"] = bool(values["include_toc"])
        return cls(**values)


_FIELD_NAMES = {f.name for f in fields(ConversionOptions)}
