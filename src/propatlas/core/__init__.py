"""Core propositional data structures."""

from .logic import (
    Connective, Atom, Not, Binary, Formula,
    Literal, Clause, ClauseSet, Sequent, format_literals,
    to_text, negate, imply, is_formula, is_atom, is_literal, as_literal,
    atoms, connective_count, depth
)
from .exceptions import (
    ProverError, LexicalError, ParseError, ParseErrorKind,
    IllegalFormulaError, SaturationLimitError
)
from .serialization import (
    formula_to_json, formula_from_json,
    clause_set_to_json, clause_set_from_json
)

__all__ = [
    # Logic
    'Connective', 'Atom', 'Not', 'Binary', 'Formula',
    'Literal', 'Clause', 'ClauseSet', 'Sequent', 'format_literals',
    'to_text', 'negate', 'imply', 'is_formula', 'is_atom', 'is_literal', 'as_literal',
    'atoms', 'connective_count', 'depth',
    # Errors
    'ProverError', 'LexicalError', 'ParseError', 'ParseErrorKind',
    'IllegalFormulaError', 'SaturationLimitError',
    # Serialization
    'formula_to_json', 'formula_from_json',
    'clause_set_to_json', 'clause_set_from_json'
]
