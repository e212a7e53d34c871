"""
Non-fatal conversion diagnostics.

Nothing in the conversion pipeline aborts on unsupported input.  Blocks that
cannot be turned into slide content are reported here and then skipped.
"""
import logging
from dataclasses import dataclass
from typing import List

from .document import Block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockNotRendered:
    block: Block

    @property
    def message(self) -> str:
        return f"Block not rendered: {type(self.block).__name__}"


class DiagnosticLog:
    """Collects diagnostics for the embedding caller and mirrors them to logging."""

    def __init__(self):
        self.entries: List[BlockNotRendered] = []

    def report(self, diagnostic: BlockNotRendered) -> None:
        self.entries.append(diagnostic)
        logger.info(diagnostic.message)

    def not_rendered(self, block: Block) -> None:
        self.report(BlockNotRendered(block))

    def __len__(self) -> int:
        return len(self.entries)
