"""JSON serialization for core objects."""

import json
from typing import Dict, Any

from .logic import (
    Connective, Atom, Not, Binary, Formula,
    Literal, Clause, ClauseSet, Sequent
)


class CoreJSONEncoder(json.JSONEncoder):
    """JSON encoder for formulas, clauses and sequents."""

    def default(self, obj):
        # Formulas
        if isinstance(obj, Atom):
            return {
                "_type": "Atom",
                "name": obj.name
            }

        elif isinstance(obj, Not):
            return {
                "_type": "Not",
                "operand": obj.operand
            }

        elif isinstance(obj, Binary):
            return {
                "_type": "Binary",
                "op": obj.op.name,
                "left": obj.left,
                "right": obj.right
            }

        # Literals
        elif isinstance(obj, Literal):
            return {
                "_type": "Literal",
                "atom": obj.atom,
                "polarity": obj.polarity
            }

        # Clauses
        elif isinstance(obj, Clause):
            return {
                "_type": "Clause",
                "formulas": list(obj.formulas)
            }

        elif isinstance(obj, ClauseSet):
            return {
                "_type": "ClauseSet",
                "clauses": list(obj.clauses)
            }

        # Sequents
        elif isinstance(obj, Sequent):
            return {
                "_type": "Sequent",
                "antecedent": list(obj.antecedent),
                "succedent": list(obj.succedent)
            }

        elif isinstance(obj, (set, frozenset)):
            return sorted(obj, key=str)

        return super().default(obj)


def decode_core_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to core objects."""
    if "_type" not in dct:
        return dct

    obj_type = dct["_type"]

    if obj_type == "Atom":
        return Atom(dct["name"])

    elif obj_type == "Not":
        return Not(dct["operand"])

    elif obj_type == "Binary":
        return Binary(Connective[dct["op"]], dct["left"], dct["right"])

    elif obj_type == "Literal":
        return Literal(dct["atom"], dct["polarity"])

    elif obj_type == "Clause":
        return Clause(*dct["formulas"])

    elif obj_type == "ClauseSet":
        return ClauseSet(dct["clauses"])

    elif obj_type == "Sequent":
        return Sequent(tuple(dct["antecedent"]), tuple(dct["succedent"]))

    return dct


# Convenience functions

def formula_to_json(formula: Formula, indent: int = 2) -> str:
    """Convert a Formula to JSON string."""
    return json.dumps(formula, cls=CoreJSONEncoder, indent=indent)


def formula_from_json(json_str: str) -> Formula:
    """Create a Formula from JSON string."""
    return json.loads(json_str, object_hook=decode_core_object)


def clause_set_to_json(clauses: ClauseSet, indent: int = 2) -> str:
    return json.dumps(clauses, cls=CoreJSONEncoder, indent=indent)


def clause_set_from_json(json_str: str) -> ClauseSet:
    return json.loads(json_str, object_hook=decode_core_object)
