"""Tests for normalform.normalizer module."""

import unittest

from propatlas.core.exceptions import IllegalFormulaError
from propatlas.core.logic import Atom, Not, Clause, ClauseSet, Literal
from propatlas.normalform import CNFNormalizer, UniformTable, normalize
from propatlas.parsing import parse_formula

P, Q, R = Atom("P"), Atom("Q"), Atom("R")


def literal_sets(*clauses):
    return frozenset(frozenset(clause) for clause in clauses)


class TestCNFNormalizer(unittest.TestCase):
    """Test clause expansion with the default table."""

    def test_conjunction(self):
        result = normalize(parse_formula("P & Q."))
        self.assertEqual(result.as_sets(), literal_sets([Literal("P")], [Literal("Q")]))

    def test_implication(self):
        result = normalize(parse_formula("P => Q."))
        self.assertEqual(result, ClauseSet([Clause(Not(P), Q)]))
        self.assertEqual(result.as_sets(), literal_sets([Literal("P", False), Literal("Q")]))

    def test_literal_is_already_normal(self):
        self.assertEqual(normalize(Not(P)), ClauseSet([Clause(Not(P))]))

    def test_branch_copies_go_to_the_end(self):
        result = normalize(parse_formula("(P & Q) | R."))
        self.assertEqual(result, ClauseSet([Clause(R, P), Clause(R, Q)]))

    def test_every_clause_is_normal(self):
        result = normalize(parse_formula("!((P <=> Q) => (!R | (P & Q))) | R."))
        self.assertTrue(all(clause.is_normal for clause in result))
        self.assertLessEqual(result.atoms(), {"P", "Q", "R"})

    def test_double_negation_idempotence(self):
        for text in ["P.", "P & Q.", "P => Q.", "!(P | Q) <=> R."]:
            with self.subTest(text=text):
                formula = parse_formula(text)
                self.assertEqual(normalize(Not(Not(formula))), normalize(formula))

    def test_negated_goal(self):
        result = normalize(Not(parse_formula("P => P.")))
        self.assertEqual(result, ClauseSet([Clause(P), Clause(Not(P))]))

    def test_illegal_input(self):
        for bad in [None, "P & Q.", Clause(P)]:
            with self.assertRaises(IllegalFormulaError):
                normalize(bad)

    def test_input_is_unchanged(self):
        formula = parse_formula("(P & Q) | R.")
        normalize(formula)
        self.assertEqual(formula, parse_formula("(P & Q) | R."))


class TestUniformNormalization(unittest.TestCase):
    """Normalization under the legacy table."""

    def setUp(self):
        self.normalizer = CNFNormalizer("uniform")

    def test_table_instance_accepted(self):
        self.assertEqual(CNFNormalizer(UniformTable()).table.name, "uniform")

    def test_same_as_classical_on_positive_rows(self):
        for text in ["P & Q.", "P => Q.", "P | (Q & R)."]:
            formula = parse_formula(text)
            self.assertEqual(self.normalizer.normalize(formula), normalize(formula))

    def test_negated_implication_keeps_both_sides(self):
        result = self.normalizer.normalize(Not(parse_formula("P => Q.")))
        self.assertEqual(result, ClauseSet([Clause(P, Q)]))

    def test_iff(self):
        result = self.normalizer.normalize(parse_formula("P <=> Q."))
        self.assertEqual(result, ClauseSet([Clause(P), Clause(Not(Q))]))


if __name__ == '__main__':
    unittest.main()
