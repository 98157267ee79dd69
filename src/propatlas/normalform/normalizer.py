"""Conjunctive normal form by clause expansion.

The normalizer keeps a worklist of clauses whose conjunction is the formula
being normalized. It repeatedly takes the first non-literal formula of a clause
and expands it with the configured table: a non-branching expansion replaces
the clause by an extended copy, a branching one removes the clause and appends
one extended copy per part to the end of the worklist. A clause is finished
once every formula in it is a literal.
"""

import logging
from typing import List, Optional, Union

from propatlas.core.exceptions import IllegalFormulaError
from propatlas.core.logic import Clause, ClauseSet, Formula, is_formula, is_literal
from .tables import ExpansionTable, get_expansion_table

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "classical"


class CNFNormalizer:
    """Rewrites a formula into a ClauseSet."""

    def __init__(self, table: Union[str, ExpansionTable] = DEFAULT_TABLE):
        """
        Args:
            table: Expansion table instance or registered table name
        """
        if isinstance(table, str):
            table = get_expansion_table(table)
        self.table = table

    def normalize(self, formula: Formula) -> ClauseSet:
        """Normalize a formula into conjunctive normal form.

        Raises:
            IllegalFormulaError: If ``formula`` is not a Formula
        """
        if not is_formula(formula):
            raise IllegalFormulaError(formula)

        worklist: List[Clause] = [Clause(formula)]
        index = 0
        while index < len(worklist):
            clause = worklist[index]
            position = self._first_expandable(clause)
            if position is None:
                index += 1
                continue

            target = clause.formulas[position]
            rest = clause.without(position)
            expansion = self.table.expand(target)
            logger.debug("%s rule on %s in clause %r", expansion.rule, target, clause)

            if expansion.branches:
                del worklist[index]
                worklist.extend(rest.extend(*part) for part in expansion.parts)
            else:
                worklist[index] = rest.extend(*expansion.parts[0])

        result = ClauseSet(worklist)
        logger.debug("Normal form with %d clauses: %r", len(result), result)
        return result

    def _first_expandable(self, clause: Clause) -> Optional[int]:
        for position, formula in enumerate(clause.formulas):
            if not is_literal(formula):
                return position
        return None


def normalize(formula: Formula, table: Union[str, ExpansionTable] = DEFAULT_TABLE) -> ClauseSet:
    """Normalize a formula with a fresh CNFNormalizer."""
    return CNFNormalizer(table).normalize(formula)
