"""Binary resolution inference rule."""

from typing import List, Optional

from .base import Rule, RuleApplication
from propatlas.proofs.state import ProofState, LiteralClause


class ResolutionRule(Rule):
    """Binary resolution: cancel a complementary pair of literals between two clauses.

    Clauses are literal sets, so duplicate literals in the resolvent collapse
    to one (propositional factoring).
    """

    @property
    def name(self) -> str:
        return "resolution"

    def apply(self, state: ProofState, clause_indices: List[int]) -> Optional[RuleApplication]:
        """
        Apply binary resolution between two clauses.

        Args:
            state: Current proof state
            clause_indices: List of two indices [clause1_idx, clause2_idx] in processed set

        Returns:
            RuleApplication if successful, None otherwise
        """
        if len(clause_indices) != 2:
            return None

        clause1_idx, clause2_idx = clause_indices
        if clause1_idx >= len(state.processed) or clause2_idx >= len(state.processed):
            return None

        clause1 = state.processed[clause1_idx]
        clause2 = state.processed[clause2_idx]
        resolvents = self._binary_resolution(clause1, clause2)
        if not resolvents:
            return None

        return RuleApplication(
            rule_name=self.name,
            parents=[clause1, clause2],
            generated_clauses=resolvents
        )

    def _binary_resolution(self, clause1: LiteralClause, clause2: LiteralClause) -> List[LiteralClause]:
        resolvents = []
        for literal in sorted(clause1):
            complement = literal.complement()
            if complement in clause2:
                resolvent = (clause1 - {literal}) | (clause2 - {complement})
                if resolvent not in resolvents:
                    resolvents.append(resolvent)
        return resolvents
