"""Given clause saturation loop.

This module decides unsatisfiability of a propositional clause set with the
given clause algorithm:
1. Takes the oldest unprocessed clause as the given clause
2. Drops it if a processed clause subsumes it
3. Removes processed clauses it subsumes, then moves it to processed
4. Resolves it against every other processed clause
5. Keeps resolvents that are neither tautologies nor subsumed

Deriving the empty clause proves the set unsatisfiable. Running out of
unprocessed clauses without it means the set is satisfiable; over finitely many
atoms only finitely many clauses exist, so the loop always stops.
"""

import logging
from typing import List, Optional

from propatlas.core.exceptions import SaturationLimitError
from propatlas.core.logic import ClauseSet, format_literals
from propatlas.proofs.state import ProofState, LiteralClause
from propatlas.rules import ResolutionRule, SubsumptionRule, RuleApplication
from .base import Loop, LoopResult

logger = logging.getLogger(__name__)


class SaturationLoop(Loop):
    """Binary resolution saturation with forward and backward subsumption."""

    def __init__(self, max_steps: Optional[int] = None):
        """
        Args:
            max_steps: Maximum number of given clauses to process, None for no limit
        """
        super().__init__(max_steps)
        self.resolution = ResolutionRule()
        self.subsumption = SubsumptionRule()

    @property
    def name(self) -> str:
        return "saturation"

    def run(self, clauses: ClauseSet) -> LoopResult:
        initial = self._initial_clauses(clauses)
        state = ProofState(processed=[], unprocessed=initial)
        applications: List[RuleApplication] = []
        steps = 0

        while state.unprocessed:
            if self.max_steps is not None and steps >= self.max_steps:
                raise SaturationLimitError(self.max_steps, len(state.processed), len(state.unprocessed))
            given = state.next_given()
            steps += 1

            if self.is_contradiction(given):
                return self._finish(True, applications, state, steps)
            if self.is_subsumed(given, state.processed):
                logger.debug("Given clause %s is subsumed", format_literals(given))
                continue

            state.add_processed(given)
            given_idx = len(state.processed) - 1
            self._backward_simplify(state, given_idx, applications)
            given_idx = len(state.processed) - 1

            logger.debug("Given clause %s", format_literals(given))
            for i in range(given_idx):
                result = self.resolution.apply(state, [i, given_idx])
                if result is None:
                    continue
                kept = self._forward_simplify(result.generated_clauses, state)
                if not kept:
                    continue
                applications.append(RuleApplication(
                    rule_name=result.rule_name,
                    parents=result.parents,
                    generated_clauses=kept
                ))
                logger.debug("%s", applications[-1].format())
                if any(self.is_contradiction(clause) for clause in kept):
                    return self._finish(True, applications, state, steps)
                for clause in kept:
                    state.add_unprocessed(clause)

        return self._finish(False, applications, state, steps)

    def _initial_clauses(self, clauses: ClauseSet) -> List[LiteralClause]:
        """Literal sets of the input, without tautologies and duplicates."""
        initial = []
        for clause in clauses:
            literals = clause.literal_set()
            if self.is_tautology(literals):
                logger.debug("Dropping tautology %s", format_literals(literals))
                continue
            if literals not in initial:
                initial.append(literals)
        return initial

    def _forward_simplify(self, resolvents: List[LiteralClause], state: ProofState) -> List[LiteralClause]:
        """Filter out tautologies and clauses subsumed by existing clauses."""
        kept = []
        for clause in resolvents:
            if self.is_tautology(clause):
                continue
            if self.is_subsumed(clause, state.all_clauses + kept):
                continue
            kept.append(clause)
        return kept

    def _backward_simplify(self, state: ProofState, given_idx: int, applications: List[RuleApplication]):
        """Remove processed clauses subsumed by the given clause."""
        result = self.subsumption.apply(state, [given_idx])
        if result is None:
            return
        state.processed = [c for c in state.processed if c not in result.deleted_clauses]
        applications.append(result)
        logger.debug("%s", result.format())

    def _finish(self, unsatisfiable, applications, state, steps) -> LoopResult:
        return LoopResult(
            unsatisfiable=unsatisfiable,
            applications=applications,
            final_state=state,
            metadata={'given_clauses': steps}
        )
