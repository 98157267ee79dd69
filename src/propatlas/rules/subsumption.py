"""Subsumption elimination rule."""

from typing import List, Optional

from .base import Rule, RuleApplication
from propatlas.proofs.state import ProofState, LiteralClause


def subsumes(clause1: LiteralClause, clause2: LiteralClause) -> bool:
    """Check if clause1 subsumes clause2 (every literal of clause1 is in clause2)."""
    return clause1 <= clause2


class SubsumptionRule(Rule):
    """Backward subsumption: a processed clause removes the processed clauses it subsumes."""

    @property
    def name(self) -> str:
        return "subsumption"

    def apply(self, state: ProofState, clause_indices: List[int]) -> Optional[RuleApplication]:
        """
        Args:
            state: Current proof state
            clause_indices: One index [clause_idx] of the subsuming clause in the processed set

        Returns:
            RuleApplication listing the deleted clauses, None if nothing is subsumed
        """
        if len(clause_indices) != 1 or clause_indices[0] >= len(state.processed):
            return None

        subsumer = state.processed[clause_indices[0]]
        deleted = [clause for i, clause in enumerate(state.processed)
                   if i != clause_indices[0] and subsumes(subsumer, clause)]
        if not deleted:
            return None

        return RuleApplication(
            rule_name=self.name,
            parents=[subsumer],
            deleted_clauses=deleted
        )
