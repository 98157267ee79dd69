"""Saturation state representation."""

from dataclasses import dataclass
from typing import FrozenSet, List

from propatlas.core.logic import Literal

LiteralClause = FrozenSet[Literal]


@dataclass
class ProofState:
    """Represents a saturation state with processed and unprocessed clauses."""
    processed: List[LiteralClause]
    unprocessed: List[LiteralClause]

    def __post_init__(self):
        self.processed = list(self.processed)
        self.unprocessed = list(self.unprocessed)

    @property
    def all_clauses(self) -> List[LiteralClause]:
        """Return all clauses (processed + unprocessed)."""
        return self.processed + self.unprocessed

    def add_processed(self, clause: LiteralClause):
        self.processed.append(clause)

    def add_unprocessed(self, clause: LiteralClause):
        self.unprocessed.append(clause)

    def next_given(self) -> LiteralClause:
        """Remove and return the oldest unprocessed clause."""
        return self.unprocessed.pop(0)
