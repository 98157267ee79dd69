"""Literal pool cancellation.

Every literal of every clause is moved into a positive or a negative pool,
emptying (and dropping) the clauses as it goes. Atoms present in both pools
cancel out of both, and repeated atoms within a pool collapse to one. The
clauses count as contradictory when both pools end empty.

Pooling ignores which clause a literal came from, so this loop can report a
contradiction for satisfiable clauses such as ``{!P, P}``.
"""

import logging
from typing import List

from propatlas.core.logic import ClauseSet, Literal
from propatlas.rules import RuleApplication
from .base import Loop, LoopResult

logger = logging.getLogger(__name__)


def _collapse(pool: List[str]) -> List[str]:
    return list(dict.fromkeys(pool))


class CancellationLoop(Loop):
    """Cancels complementary literals pooled from all clauses."""

    @property
    def name(self) -> str:
        return "cancellation"

    def run(self, clauses: ClauseSet) -> LoopResult:
        positive: List[str] = []
        negative: List[str] = []
        for clause in clauses:
            for literal in clause.literals():
                (positive if literal.polarity else negative).append(literal.atom)
        logger.debug("Pooled %d positive and %d negative literals", len(positive), len(negative))

        applications: List[RuleApplication] = []
        changed = True
        while changed:
            changed = False

            common = [atom for atom in _collapse(positive) if atom in negative]
            for atom in common:
                applications.append(RuleApplication(
                    rule_name="cancellation",
                    parents=[frozenset({Literal(atom, True)}), frozenset({Literal(atom, False)})],
                    metadata={'atom': atom}
                ))
                logger.debug("Cancelled %s", atom)
            if common:
                positive = [atom for atom in positive if atom not in common]
                negative = [atom for atom in negative if atom not in common]
                changed = True

            collapsed_positive = _collapse(positive)
            collapsed_negative = _collapse(negative)
            if len(collapsed_positive) < len(positive) or len(collapsed_negative) < len(negative):
                positive, negative = collapsed_positive, collapsed_negative
                changed = True

        return LoopResult(
            unsatisfiable=not positive and not negative,
            applications=applications,
            metadata={
                'positive_pool': positive,
                'negative_pool': negative,
            }
        )
