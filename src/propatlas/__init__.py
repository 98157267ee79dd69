"""
PropAtlas: a small theorem prover for classical propositional logic.

A formula written in the textual syntax (``P => (Q | !Q).``) is tokenized and
parsed into a formula tree, then handled by two independent provers:

- Resolution refutation: the negated goal is expanded into clauses and refuted
  by a registered loop (given-clause saturation by default)
- Sequent-calculus search: the goal ``|= F`` is decomposed into a trace of
  sequents that can be rendered for inspection

Basic usage:
    >>> from propatlas import prove, parse_formula, resolve
    >>> resolve(parse_formula("P => P."))
    True
    >>> report = prove("(P => Q) & (Q => R) => (P => R).")
    >>> print(report.summary())
"""

__version__ = "0.1.0"

from typing import Optional

# Core logic structures
from propatlas.core import (
    Connective, Atom, Not, Binary, Formula,
    Literal, Clause, ClauseSet, Sequent,
    to_text, negate, imply, atoms,
    ProverError, LexicalError, ParseError, ParseErrorKind,
    IllegalFormulaError, SaturationLimitError,
    formula_to_json, formula_from_json
)

# Parsing
from propatlas.parsing import tokenize, parse, parse_formula

# Normal form
from propatlas.normalform import CNFNormalizer, normalize, get_expansion_table

# Refutation loops
from propatlas.loops import Loop, get_loop

# Proof structures
from propatlas.proofs import ProofTrace, TraceEntry

# Provers
from propatlas.provers import (
    RefutationResult, ResolutionRefuter, refute, resolve,
    SequentProver, prove_sequent
)
from propatlas.report import ProofReport, report_to_json

# Configuration
from propatlas.utils.config import get_config


def prove(text: str,
          strategy: Optional[str] = None,
          table: Optional[str] = None,
          max_steps: Optional[int] = None,
          order: Optional[str] = None) -> ProofReport:
    """
    Parse a formula and run both provers on it.

    Arguments left as None are read from the global configuration.

    Args:
        text: Formula text terminated by ``.``
        strategy: Refutation loop name (``saturation`` or ``cancellation``)
        table: Expansion table name (``classical`` or ``uniform``)
        max_steps: Bound on saturation steps
        order: Trace display order (``chronological`` or ``reverse``)

    Returns:
        ProofReport with the verdict, the refutation and the sequent trace
    """
    config = get_config()
    strategy = strategy or config.get("resolution.strategy", "saturation")
    table = table or config.get("resolution.expansion_table", "classical")
    if max_steps is None:
        max_steps = config.get("resolution.max_steps")
    order = order or config.get("sequent.display_order", "chronological")

    formula = parse_formula(text)
    refutation = refute(formula, strategy, table, max_steps)
    trace = prove_sequent(formula)
    return ProofReport(text, formula, refutation, trace, order)


__all__ = [
    # Version
    "__version__",

    # Core logic
    "Connective", "Atom", "Not", "Binary", "Formula",
    "Literal", "Clause", "ClauseSet", "Sequent",
    "to_text", "negate", "imply", "atoms",
    "formula_to_json", "formula_from_json",

    # Errors
    "ProverError", "LexicalError", "ParseError", "ParseErrorKind",
    "IllegalFormulaError", "SaturationLimitError",

    # Parsing
    "tokenize", "parse", "parse_formula",

    # Normal form
    "CNFNormalizer", "normalize", "get_expansion_table",

    # Loops
    "Loop", "get_loop",

    # Proofs
    "ProofTrace", "TraceEntry",

    # Provers
    "RefutationResult", "ResolutionRefuter", "refute", "resolve",
    "SequentProver", "prove_sequent",
    "ProofReport", "report_to_json",

    # Configuration
    "get_config",

    # High-level API
    "prove"
]
