"""Combined outcome of proving one formula: verdict, refutation and sequent trace."""

import json
from dataclasses import dataclass
from typing import Any, Dict, List

from propatlas.core.logic import Formula
from propatlas.core.serialization import CoreJSONEncoder
from propatlas.proofs.trace import CHRONOLOGICAL, ProofTrace
from propatlas.provers.resolution import RefutationResult

BANNER = "=" * 40
RULE = "-" * 40
PROVEN = "THEOREM PROVEN"
NOT_PROVEN = "NOT A THEOREM"


@dataclass
class ProofReport:
    text: str
    formula: Formula
    refutation: RefutationResult
    trace: ProofTrace
    display_order: str = CHRONOLOGICAL

    @property
    def is_theorem(self) -> bool:
        return self.refutation.is_theorem

    @property
    def status(self) -> str:
        return PROVEN if self.is_theorem else NOT_PROVEN

    def render(self) -> str:
        """Full report: formula, clauses, refutation steps, sequent trace, verdict."""
        refutation = self.refutation
        lines: List[str] = [
            BANNER,
            f"Formula:  {self.formula}",
            f"Negated:  {refutation.negated}",
            f"Clauses:  {refutation.clauses!r}",
            RULE,
            f"Refutation ({refutation.strategy}, {refutation.table} table):",
        ]
        steps = refutation.format_steps()
        lines.extend("  " + step for step in steps)
        if not steps:
            lines.append("  no inferences")
        lines.append(RULE)
        lines.append("Sequent trace:")
        lines.append(self.trace.format(self.display_order))
        lines.append(BANNER)
        lines.append(self.status)
        return "\n".join(lines)

    def summary(self) -> str:
        return "\n".join([
            f"Formula: {self.formula}",
            f"Status:  {self.status}",
            f"Clauses: {len(self.refutation.clauses)}, steps: {len(self.refutation.steps)}, "
            f"sequents: {len(self.trace)}",
        ])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "formula": self.formula,
            "is_theorem": self.is_theorem,
            "status": self.status,
            "refutation": self.refutation.to_dict(),
            "trace": self.trace.to_dict(),
            "display_order": self.display_order,
        }


def report_to_json(report: ProofReport, indent: int = 2) -> str:
    """Serialize a report; formulas and sequents keep their ``_type`` tags."""
    return json.dumps(report.to_dict(), cls=CoreJSONEncoder, indent=indent)
