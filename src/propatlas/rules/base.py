"""Base interface for inference rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from propatlas.core.logic import format_literals
from propatlas.proofs.state import ProofState, LiteralClause


@dataclass
class RuleApplication:
    """Result of applying an inference rule."""
    rule_name: str
    parents: List[LiteralClause]  # Clauses the rule was applied to
    generated_clauses: List[LiteralClause] = field(default_factory=list)
    deleted_clauses: List[LiteralClause] = field(default_factory=list)  # For deletion rules like subsumption
    metadata: Dict[str, Any] = field(default_factory=dict)

    def format(self) -> str:
        parents = ", ".join(format_literals(c) for c in self.parents)
        if self.generated_clauses:
            produced = ", ".join(format_literals(c) for c in self.generated_clauses)
            return f"{self.rule_name}: {parents} -> {produced}"
        deleted = ", ".join(format_literals(c) for c in self.deleted_clauses)
        return f"{self.rule_name}: {parents} removes {deleted}"


class Rule(ABC):
    """Abstract base class for inference rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the inference rule."""
        pass

    @abstractmethod
    def apply(self, state: ProofState, clause_indices: List[int]) -> Optional[RuleApplication]:
        """
        Apply the rule to the given clauses.

        Args:
            state: Current proof state
            clause_indices: Indices of clauses to apply the rule to
                           (indices into processed clauses)

        Returns:
            RuleApplication if the rule was successfully applied, None otherwise
        """
        pass
