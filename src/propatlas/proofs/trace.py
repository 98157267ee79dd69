"""Proof trace: every sequent created during a sequent-calculus search.

The trace is append-only and records sequents in creation order. Display
order is chosen separately when rendering, and the trace is never consulted
to steer the search.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

import networkx as nx

from propatlas.core.logic import Sequent

CHRONOLOGICAL = "chronological"
REVERSE = "reverse"
DISPLAY_ORDERS = (CHRONOLOGICAL, REVERSE)

SEPARATOR = "-" * 24


@dataclass(frozen=True)
class TraceEntry:
    """A sequent together with the step that created it."""
    index: int
    sequent: Sequent
    parent: Optional[int] = None
    rule: Optional[str] = None

    @property
    def number(self) -> int:
        return self.index + 1


class ProofTrace:
    """Append-only record of sequents with a parent -> child derivation graph."""

    def __init__(self):
        self._entries: List[TraceEntry] = []
        self.graph = nx.DiGraph()

    def record(self, sequent: Sequent, parent: Optional[int] = None, rule: Optional[str] = None) -> TraceEntry:
        """Append a newly created sequent and return its entry."""
        if parent is not None and not 0 <= parent < len(self._entries):
            raise IndexError(f"No trace entry {parent}")
        entry = TraceEntry(len(self._entries), sequent, parent, rule)
        self._entries.append(entry)
        self.graph.add_node(entry.index)
        if parent is not None:
            self.graph.add_edge(parent, entry.index, rule=rule)
        return entry

    @property
    def entries(self) -> List[TraceEntry]:
        """Entries in creation order."""
        return list(self._entries)

    @property
    def root(self) -> Optional[TraceEntry]:
        return self._entries[0] if self._entries else None

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[TraceEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> TraceEntry:
        return self._entries[index]

    def children(self, index: int) -> List[TraceEntry]:
        return [self._entries[i] for i in sorted(self.graph.successors(index))]

    def leaves(self) -> List[TraceEntry]:
        """Entries that were never expanded further."""
        return [entry for entry in self._entries if self.graph.out_degree(entry.index) == 0]

    def branch_count(self) -> int:
        """Number of rule applications that split a sequent in two."""
        return sum(1 for node in self.graph.nodes if self.graph.out_degree(node) > 1)

    def display(self, order: str = CHRONOLOGICAL) -> List[TraceEntry]:
        """Entries in display order, without touching the recorded order."""
        if order == CHRONOLOGICAL:
            return list(self._entries)
        if order == REVERSE:
            return list(reversed(self._entries))
        raise ValueError(f"Unknown display order: {order}")

    def format(self, order: str = CHRONOLOGICAL) -> str:
        lines = []
        for entry in self.display(order):
            line = f"{entry.number}\t{entry.sequent}"
            if entry.rule is not None:
                line += f"\t[{entry.rule} from {entry.parent + 1}]"
            if self.graph.out_degree(entry.index) == 0:
                line += "\t(closed)" if entry.sequent.is_closed else "\t(open)"
            lines.append(line)
            lines.append(SEPARATOR)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [
                {
                    "index": entry.index,
                    "sequent": entry.sequent,
                    "parent": entry.parent,
                    "rule": entry.rule,
                }
                for entry in self._entries
            ],
            "leaves": [entry.index for entry in self.leaves()],
        }

    def __repr__(self) -> str:
        return f"ProofTrace(entries={len(self._entries)}, leaves={len(self.leaves())})"
