"""Uniform-notation expansion tables for clause normalization.

A table classifies every non-literal formula and says how it expands inside a
clause: either its parts are appended to the clause itself, or the clause
branches into one copy per part.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Type

from propatlas.core.logic import Connective, Atom, Not, Binary, Formula


@dataclass(frozen=True)
class Expansion:
    """How one formula is rewritten inside a clause."""
    rule: str
    parts: Tuple[Tuple[Formula, ...], ...]

    @property
    def branches(self) -> bool:
        return len(self.parts) > 1


def _extend(rule, *formulas) -> Expansion:
    return Expansion(rule, (tuple(formulas),))


def _split(rule, *parts) -> Expansion:
    return Expansion(rule, tuple(tuple(part) for part in parts))


class ExpansionTable(ABC):
    """Abstract base class for expansion tables."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    def expand(self, formula: Formula) -> Optional[Expansion]:
        """Classify a formula; literals have no expansion and return None."""
        match formula:
            case Atom() | Not(Atom()):
                return None
            case Not(Not(inner)):
                return _extend("double-negation", inner)
            case Not(Binary(op, left, right)):
                return self.expand_negated(op, left, right)
            case Binary(op, left, right):
                return self.expand_binary(op, left, right)
        raise TypeError(f"Expected Formula, got {formula!r}")

    def expand_binary(self, op: Connective, left: Formula, right: Formula) -> Expansion:
        match op:
            case Connective.AND:
                return _split("and", [left], [right])
            case Connective.OR:
                return _extend("or", left, right)
            case Connective.IMPLY:
                return _extend("imply", Not(left), right)
            case Connective.IFF:
                return self.expand_iff(left, right)

    @abstractmethod
    def expand_iff(self, left: Formula, right: Formula) -> Expansion:
        pass

    @abstractmethod
    def expand_negated(self, op: Connective, left: Formula, right: Formula) -> Expansion:
        pass


class ClassicalTable(ExpansionTable):
    """Textbook expansion: the resulting clauses are equivalent to the input."""

    @property
    def name(self) -> str:
        return "classical"

    def expand_iff(self, left, right):
        return _split("iff", [Not(left), right], [left, Not(right)])

    def expand_negated(self, op, left, right):
        match op:
            case Connective.AND:
                return _extend("not-and", Not(left), Not(right))
            case Connective.OR:
                return _split("not-or", [Not(left)], [Not(right)])
            case Connective.IMPLY:
                return _split("not-imply", [left], [Not(right)])
            case Connective.IFF:
                return _split("not-iff", [left, right], [Not(left), Not(right)])


class UniformTable(ExpansionTable):
    """The fixed legacy table, reproduced row for row.

    Only the And, Or and Imply rows agree with classical logic; the negated
    rows and both Iff rows do not preserve equivalence.
    """

    @property
    def name(self) -> str:
        return "uniform"

    def expand_iff(self, left, right):
        return _split("iff", [left], [Not(right)])

    def expand_negated(self, op, left, right):
        match op:
            case Connective.AND:
                return _split("not-and", [Not(left)], [Not(right)])
            case Connective.OR:
                return _extend("not-or", Not(left), Not(right))
            case Connective.IMPLY:
                return _extend("not-imply", left, right)
            case Connective.IFF:
                return _split("not-iff", [Not(left)], [Not(right)])


class ExpansionTableRegistry:
    """Registry for managing expansion tables."""

    def __init__(self):
        self._tables: Dict[str, Type[ExpansionTable]] = {}
        self._register_default_tables()

    def _register_default_tables(self):
        self.register('classical', ClassicalTable)
        self.register('uniform', UniformTable)

    def register(self, name: str, table_class: Type[ExpansionTable]):
        self._tables[name.lower()] = table_class

    def create_table(self, name: str) -> ExpansionTable:
        name = name.lower()
        if name not in self._tables:
            raise ValueError(f"Unknown expansion table: {name}")
        return self._tables[name]()

    def list_tables(self) -> List[str]:
        return list(self._tables.keys())


_registry = ExpansionTableRegistry()


def get_expansion_table(name: str) -> ExpansionTable:
    """Get an expansion table instance."""
    return _registry.create_table(name)


def list_expansion_tables() -> List[str]:
    return _registry.list_tables()
