"""Resolution refutation: a formula is a theorem iff its negation is contradictory."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from propatlas.core.exceptions import IllegalFormulaError
from propatlas.core.logic import ClauseSet, Formula, Not, is_formula
from propatlas.loops import Loop, get_loop
from propatlas.normalform import CNFNormalizer, ExpansionTable
from propatlas.rules import RuleApplication

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "saturation"
DEFAULT_TABLE = "classical"


@dataclass
class RefutationResult:
    """Verdict of a refutation together with the data that produced it."""
    formula: Formula
    negated: Formula
    clauses: ClauseSet
    is_theorem: bool
    strategy: str
    table: str
    steps: List[RuleApplication] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def format_steps(self) -> List[str]:
        return [f"{i + 1:2d}. {step.format()}" for i, step in enumerate(self.steps)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "formula": self.formula,
            "negated": self.negated,
            "clauses": self.clauses,
            "is_theorem": self.is_theorem,
            "strategy": self.strategy,
            "table": self.table,
            "steps": [step.format() for step in self.steps],
            "metadata": self.metadata,
        }


class ResolutionRefuter:
    """Negates a formula, normalizes the negation and refutes the clauses."""

    def __init__(self,
                 strategy: Union[str, Loop] = DEFAULT_STRATEGY,
                 table: Union[str, ExpansionTable] = DEFAULT_TABLE,
                 max_steps: Optional[int] = None):
        """
        Args:
            strategy: Loop instance or registered loop name
            table: Expansion table instance or registered table name
            max_steps: Iteration bound handed to a loop created by name
        """
        if isinstance(strategy, str):
            strategy = get_loop(strategy, max_steps=max_steps)
        self.loop = strategy
        self.normalizer = CNFNormalizer(table)

    def refute(self, formula: Formula) -> RefutationResult:
        """
        Decide whether a formula is a theorem.

        Raises:
            IllegalFormulaError: If ``formula`` is None or not a Formula
            SaturationLimitError: If a bounded loop runs out of steps
        """
        if not is_formula(formula):
            raise IllegalFormulaError(formula)

        negated = Not(formula)
        clauses = self.normalizer.normalize(negated)
        logger.debug("Refuting %d clauses of %s with %s", len(clauses), negated, self.loop.name)
        outcome = self.loop.run(clauses)

        result = RefutationResult(
            formula=formula,
            negated=negated,
            clauses=clauses,
            is_theorem=outcome.unsatisfiable,
            strategy=self.loop.name,
            table=self.normalizer.table.name,
            steps=outcome.applications,
            metadata=outcome.metadata
        )
        logger.info("%s is %s", formula, "a theorem" if result.is_theorem else "not a theorem")
        return result

    def resolve(self, formula: Formula) -> bool:
        return self.refute(formula).is_theorem


def refute(formula: Formula, strategy: str = DEFAULT_STRATEGY, table: str = DEFAULT_TABLE,
           max_steps: Optional[int] = None) -> RefutationResult:
    """Refute a formula with a fresh ResolutionRefuter."""
    return ResolutionRefuter(strategy, table, max_steps).refute(formula)


def resolve(formula: Formula, strategy: str = DEFAULT_STRATEGY, table: str = DEFAULT_TABLE) -> bool:
    """True iff the formula is a theorem."""
    return refute(formula, strategy, table).is_theorem
