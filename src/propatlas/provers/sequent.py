"""Goal-directed sequent-calculus search.

The search starts from ``|= F`` and keeps a FIFO frontier of sequents. The head
of the frontier is discarded once every formula on both of its sides is an
atom. Otherwise its first non-atomic formula (antecedent before succedent) is
decomposed: a non-branching rule replaces the head in place, so it is expanded
again on the next iteration; a branching rule removes the head and appends both
premises to the end of the frontier.

Left rules (formula in the antecedent)::

    !X        X moves to the succedent
    L & R     L, R added to the antecedent
    L | R     branch: L added to the antecedent | R added to the antecedent
    L => R    branch: L added to the succedent | R added to the antecedent
    L <=> R   L => R, R => L added to the antecedent

Right rules (formula in the succedent)::

    !X        X moves to the antecedent
    L & R     branch: L added to the succedent | R added to the succedent
    L | R     L, R added to the succedent
    L => R    L added to the antecedent, R added to the succedent
    L <=> R   branch: L => R added to the succedent | R => L added to the succedent

The search records every sequent it creates but gives no verdict; validity is
decided by resolution refutation.
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Tuple

from propatlas.core.exceptions import IllegalFormulaError
from propatlas.core.logic import (
    Connective, Atom, Not, Binary, Formula, Sequent, imply, is_formula
)
from propatlas.proofs.trace import ProofTrace, TraceEntry

logger = logging.getLogger(__name__)

ANTECEDENT = "left"
SUCCEDENT = "right"


class SequentProver:
    """Expands a formula into a sequent-calculus derivation."""

    def prove(self, formula: Formula) -> ProofTrace:
        """
        Run the search for ``|= formula``.

        Returns:
            The trace of every sequent created, root first

        Raises:
            IllegalFormulaError: If ``formula`` is None or not a Formula
        """
        if not is_formula(formula):
            raise IllegalFormulaError(formula)

        trace = ProofTrace()
        frontier: Deque[TraceEntry] = deque([trace.record(Sequent((), (formula,)))])

        while frontier:
            entry = frontier[0]
            selected = self.select(entry.sequent)
            if selected is None:
                frontier.popleft()
                logger.debug("Axiom %s", entry.sequent)
                continue

            premises, rule = self.expand(entry.sequent, *selected)
            created = [trace.record(premise, entry.index, rule) for premise in premises]
            logger.debug("%s on %s gives %s", rule, entry.sequent,
                         " | ".join(str(e.sequent) for e in created))
            if len(created) == 1:
                frontier[0] = created[0]
            else:
                frontier.popleft()
                frontier.extend(created)

        logger.debug("Sequent search finished with %d sequents, %d leaves",
                     len(trace), len(trace.leaves()))
        return trace

    def select(self, sequent: Sequent) -> Optional[Tuple[str, int]]:
        """Side and position of the first non-atomic formula, None for an axiom."""
        for position, formula in enumerate(sequent.antecedent):
            if not isinstance(formula, Atom):
                return ANTECEDENT, position
        for position, formula in enumerate(sequent.succedent):
            if not isinstance(formula, Atom):
                return SUCCEDENT, position
        return None

    def expand(self, sequent: Sequent, side: str, position: int) -> Tuple[List[Sequent], str]:
        """Apply the rule for one formula; returns the premises and the rule name."""
        if side == ANTECEDENT:
            return self._expand_left(sequent.antecedent[position], sequent.remove_antecedent(position))
        return self._expand_right(sequent.succedent[position], sequent.remove_succedent(position))

    def _expand_left(self, formula: Formula, rest: Sequent) -> Tuple[List[Sequent], str]:
        match formula:
            case Not(operand):
                return [rest.add_succedent(operand)], "not-left"
            case Binary(Connective.AND, left, right):
                return [rest.add_antecedent(left, right)], "and-left"
            case Binary(Connective.OR, left, right):
                return [rest.add_antecedent(left), rest.add_antecedent(right)], "or-left"
            case Binary(Connective.IMPLY, left, right):
                return [rest.add_succedent(left), rest.add_antecedent(right)], "imply-left"
            case Binary(Connective.IFF, left, right):
                return [rest.add_antecedent(imply(left, right), imply(right, left))], "iff-left"
        raise TypeError(f"No left rule for {formula!r}")

    def _expand_right(self, formula: Formula, rest: Sequent) -> Tuple[List[Sequent], str]:
        match formula:
            case Not(operand):
                return [rest.add_antecedent(operand)], "not-right"
            case Binary(Connective.AND, left, right):
                return [rest.add_succedent(left), rest.add_succedent(right)], "and-right"
            case Binary(Connective.OR, left, right):
                return [rest.add_succedent(left, right)], "or-right"
            case Binary(Connective.IMPLY, left, right):
                return [rest.add_antecedent(left).add_succedent(right)], "imply-right"
            case Binary(Connective.IFF, left, right):
                return [rest.add_succedent(imply(left, right)),
                        rest.add_succedent(imply(right, left))], "iff-right"
        raise TypeError(f"No right rule for {formula!r}")


def prove_sequent(formula: Formula) -> ProofTrace:
    """Run a fresh SequentProver on a formula."""
    return SequentProver().prove(formula)
