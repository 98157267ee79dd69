"""Tests for core.serialization module."""

import json
import unittest

from propatlas.core.logic import (
    Connective, Atom, Not, Binary, Literal, Clause, ClauseSet, Sequent
)
from propatlas.core.serialization import (
    CoreJSONEncoder, decode_core_object,
    formula_to_json, formula_from_json,
    clause_set_to_json, clause_set_from_json
)


class TestFormulaSerialization(unittest.TestCase):

    def test_formula_round_trip(self):
        f = Binary(Connective.IFF, Not(Atom("P")), Binary(Connective.OR, Atom("Q1"), Atom("P")))
        self.assertEqual(formula_from_json(formula_to_json(f)), f)

    def test_binary_encodes_connective_name(self):
        data = json.loads(formula_to_json(Binary(Connective.IMPLY, Atom("P"), Atom("Q"))))
        self.assertEqual(data["_type"], "Binary")
        self.assertEqual(data["op"], "IMPLY")
        self.assertEqual(data["left"], {"_type": "Atom", "name": "P"})


class TestStructureSerialization(unittest.TestCase):

    def test_clause_set_round_trip(self):
        clauses = ClauseSet([Clause(Atom("P"), Not(Atom("Q"))), Clause(Atom("R"))])
        self.assertEqual(clause_set_from_json(clause_set_to_json(clauses)), clauses)

    def test_sequent_and_literal(self):
        sequent = Sequent((Atom("P"),), (Not(Atom("Q")),))
        text = json.dumps([sequent, Literal("P", False)], cls=CoreJSONEncoder)
        decoded = json.loads(text, object_hook=decode_core_object)
        self.assertEqual(decoded, [sequent, Literal("P", False)])

    def test_literal_sets_are_sorted(self):
        text = json.dumps(frozenset({Literal("Q"), Literal("P")}), cls=CoreJSONEncoder)
        decoded = json.loads(text, object_hook=decode_core_object)
        self.assertEqual(decoded, [Literal("P"), Literal("Q")])

    def test_plain_dicts_pass_through(self):
        self.assertEqual(decode_core_object({"a": 1}), {"a": 1})


if __name__ == '__main__':
    unittest.main()
