"""Base class for refutation loops."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from propatlas.core.logic import ClauseSet
from propatlas.proofs.state import ProofState, LiteralClause
from propatlas.rules import RuleApplication
from propatlas.rules.subsumption import subsumes


@dataclass
class LoopResult:
    """Outcome of running a loop over the clauses of a negated goal."""
    unsatisfiable: bool
    applications: List[RuleApplication] = field(default_factory=list)
    final_state: Optional[ProofState] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


class Loop(ABC):
    """Abstract base class for refutation loops."""

    def __init__(self, max_steps: Optional[int] = None):
        """
        Args:
            max_steps: Bound on loop iterations for loops that iterate, None for no limit
        """
        self.max_steps = max_steps

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def run(self, clauses: ClauseSet) -> LoopResult:
        """
        Decide whether a set of normal clauses is contradictory.

        Args:
            clauses: Clause set whose clauses contain only literals

        Returns:
            LoopResult with ``unsatisfiable`` set when the clauses cancel out
        """
        pass

    def is_contradiction(self, clause: LiteralClause) -> bool:
        """Check if a clause is a contradiction (empty clause)."""
        return len(clause) == 0

    def is_tautology(self, clause: LiteralClause) -> bool:
        """Check if a clause holds a complementary pair of literals."""
        return any(literal.complement() in clause for literal in clause)

    def is_subsumed(self, clause: LiteralClause, clause_set: List[LiteralClause]) -> bool:
        """Check if clause is subsumed by any clause in clause_set."""
        return any(subsumes(other, clause) for other in clause_set)
