"""Propositional formulas, literals, clauses and sequents.

Every structure in this module is immutable. Transformations build new values;
subtrees and tuple prefixes are shared freely between them, so no algorithm ever
needs to copy a formula before branching.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, Optional, Set, Tuple, Union


class Connective(Enum):
    """Binary connectives with their concrete syntax and binding strength."""
    IFF = ("<=>", 2)
    IMPLY = ("=>", 3)
    OR = ("|", 4)
    AND = ("&", 5)

    def __init__(self, symbol, precedence):
        self.symbol = symbol
        self.precedence = precedence

    def __repr__(self):
        return f"Connective.{self.name}"


NOT_SYMBOL = "!"
NOT_PRECEDENCE = 6


@dataclass(frozen=True)
class Atom:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Not:
    operand: "Formula"

    def __str__(self):
        return to_text(self)


@dataclass(frozen=True)
class Binary:
    op: Connective
    left: "Formula"
    right: "Formula"

    def __str__(self):
        return to_text(self)


Formula = Union[Atom, Not, Binary]
FORMULA_TYPES = (Atom, Not, Binary)


def is_formula(obj) -> bool:
    return isinstance(obj, FORMULA_TYPES)


def to_text(formula: Formula) -> str:
    """Render a formula in the input syntax, parenthesizing every binary node.

    The result (plus the ``.`` terminator) parses back to an equal tree.
    """
    match formula:
        case Atom(name):
            return name
        case Not(operand):
            return NOT_SYMBOL + to_text(operand)
        case Binary(op, left, right):
            return f"({to_text(left)} {op.symbol} {to_text(right)})"
    raise TypeError(f"Expected Formula, got {formula!r}")


def negate(formula: Formula) -> Not:
    return Not(formula)


def imply(left: Formula, right: Formula) -> Binary:
    return Binary(Connective.IMPLY, left, right)


def is_atom(formula: Formula) -> bool:
    return isinstance(formula, Atom)


def is_literal(formula: Formula) -> bool:
    """An atom or the negation of an atom."""
    match formula:
        case Atom():
            return True
        case Not(Atom()):
            return True
    return False


def connective_count(formula: Formula) -> int:
    match formula:
        case Atom():
            return 0
        case Not(operand):
            return 1 + connective_count(operand)
        case Binary(_, left, right):
            return 1 + connective_count(left) + connective_count(right)
    raise TypeError(f"Expected Formula, got {formula!r}")


def depth(formula: Formula) -> int:
    match formula:
        case Atom():
            return 0
        case Not(operand):
            return 1 + depth(operand)
        case Binary(_, left, right):
            return 1 + max(depth(left), depth(right))
    raise TypeError(f"Expected Formula, got {formula!r}")


def atoms(formula: Formula) -> Set[str]:
    match formula:
        case Atom(name):
            return {name}
        case Not(operand):
            return atoms(operand)
        case Binary(_, left, right):
            return atoms(left) | atoms(right)
    raise TypeError(f"Expected Formula, got {formula!r}")


@dataclass(frozen=True, order=True)
class Literal:
    """A derived view of ``Atom`` (positive) or ``Not(Atom)`` (negative)."""
    atom: str
    polarity: bool = True

    def __str__(self):
        return self.atom if self.polarity else NOT_SYMBOL + self.atom

    def complement(self) -> "Literal":
        return Literal(self.atom, not self.polarity)

    def to_formula(self) -> Formula:
        return Atom(self.atom) if self.polarity else Not(Atom(self.atom))


def format_literals(literals: Iterable[Literal]) -> str:
    """Render a set of literals as a sorted clause, ``{}`` when empty."""
    return "{" + ", ".join(map(str, sorted(literals))) + "}"


def as_literal(formula: Formula) -> Optional[Literal]:
    match formula:
        case Atom(name):
            return Literal(name, True)
        case Not(Atom(name)):
            return Literal(name, False)
    return None


class Clause:
    """An ordered disjunction of formulas, reduced to literals by normalization."""

    @staticmethod
    def check(formulas):
        for formula in formulas:
            if not is_formula(formula):
                raise TypeError(f"Expected Formula, got {formula!r}")

    def __init__(self, *formulas):
        Clause.check(formulas)
        self.formulas = tuple(formulas)

    def __repr__(self):
        return f"{{{', '.join(map(str, self.formulas))}}}"

    def __eq__(self, other):
        if not isinstance(other, Clause):
            return False
        return self.formulas == other.formulas

    def __hash__(self):
        return hash(self.formulas)

    def __len__(self):
        return len(self.formulas)

    def __iter__(self) -> Iterator[Formula]:
        return iter(self.formulas)

    def extend(self, *formulas) -> "Clause":
        return Clause(*self.formulas, *formulas)

    def without(self, index: int) -> "Clause":
        return Clause(*self.formulas[:index], *self.formulas[index + 1:])

    @property
    def is_normal(self) -> bool:
        return all(is_literal(f) for f in self.formulas)

    def literals(self) -> Tuple[Literal, ...]:
        """Literals in clause order; only meaningful once the clause is normal."""
        result = []
        for formula in self.formulas:
            literal = as_literal(formula)
            if literal is None:
                raise ValueError(f"{formula} is not a literal")
            result.append(literal)
        return tuple(result)

    def literal_set(self) -> FrozenSet[Literal]:
        return frozenset(self.literals())


class ClauseSet:
    """A conjunction of clauses: the conjunctive normal form of a formula."""

    def __init__(self, clauses: Iterable[Clause] = ()):
        self.clauses = tuple(clauses)
        for clause in self.clauses:
            if not isinstance(clause, Clause):
                raise TypeError(f"Expected Clause, got {clause!r}")

    def __repr__(self):
        return " & ".join(map(repr, self.clauses)) or "{}"

    def __eq__(self, other):
        if not isinstance(other, ClauseSet):
            return False
        return self.clauses == other.clauses

    def __hash__(self):
        return hash(self.clauses)

    def __len__(self):
        return len(self.clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self.clauses)

    def __getitem__(self, index) -> Clause:
        return self.clauses[index]

    def as_sets(self) -> FrozenSet[FrozenSet[Literal]]:
        """The clause set read as a set of sets of literals, ignoring order and repeats."""
        return frozenset(clause.literal_set() for clause in self.clauses)

    def atoms(self) -> Set[str]:
        names = set()
        for clause in self.clauses:
            for formula in clause:
                names |= atoms(formula)
        return names


def _format_side(formulas: Tuple[Formula, ...]) -> str:
    return ", ".join(map(to_text, formulas))


@dataclass(frozen=True)
class Sequent:
    """``antecedent |= succedent``: the conjunction on the left entails the disjunction on the right."""
    antecedent: Tuple[Formula, ...] = ()
    succedent: Tuple[Formula, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "antecedent", tuple(self.antecedent))
        object.__setattr__(self, "succedent", tuple(self.succedent))

    def __str__(self):
        left = _format_side(self.antecedent)
        right = _format_side(self.succedent)
        return f"{left} |= {right}".strip()

    @property
    def is_axiom(self) -> bool:
        """No connective or negation remains on either side."""
        return all(is_atom(f) for f in self.antecedent + self.succedent)

    @property
    def is_closed(self) -> bool:
        """Some atom occurs on both sides."""
        left = {f.name for f in self.antecedent if isinstance(f, Atom)}
        return any(isinstance(f, Atom) and f.name in left for f in self.succedent)

    def connective_count(self) -> int:
        return sum(connective_count(f) for f in self.antecedent + self.succedent)

    def add_antecedent(self, *formulas) -> "Sequent":
        return Sequent(self.antecedent + formulas, self.succedent)

    def add_succedent(self, *formulas) -> "Sequent":
        return Sequent(self.antecedent, self.succedent + formulas)

    def remove_antecedent(self, index: int) -> "Sequent":
        return Sequent(self.antecedent[:index] + self.antecedent[index + 1:], self.succedent)

    def remove_succedent(self, index: int) -> "Sequent":
        return Sequent(self.antecedent, self.succedent[:index] + self.succedent[index + 1:])
