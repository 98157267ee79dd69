"""Integration tests for the text-to-verdict pipeline."""

import json
import unittest

from propatlas import (
    prove, parse_formula, resolve, normalize, prove_sequent,
    report_to_json, Atom, Not, Literal, ParseError, LexicalError, ProverError
)
from propatlas.core.serialization import decode_core_object
from propatlas.report import PROVEN, NOT_PROVEN
from propatlas.utils.config import get_config, reset_config


class TestTheoremProperties(unittest.TestCase):
    """Behaviour of the full pipeline on the reference formulas."""

    def test_verdicts(self):
        self.assertTrue(resolve(parse_formula("P => P.")))
        self.assertFalse(resolve(parse_formula("P & !P.")))
        self.assertTrue(resolve(parse_formula("(P => Q) & (Q => R) => (P => R).")))
        self.assertFalse(resolve(parse_formula("P => Q.")))

    def test_normal_forms(self):
        self.assertEqual(normalize(parse_formula("P & Q.")).as_sets(),
                         frozenset({frozenset({Literal("P")}), frozenset({Literal("Q")})}))
        self.assertEqual(normalize(parse_formula("P => Q.")).as_sets(),
                         frozenset({frozenset({Literal("P", False), Literal("Q")})}))

    def test_double_negation(self):
        x = parse_formula("(P | Q) => !R.")
        self.assertEqual(normalize(Not(Not(x))), normalize(x))

    def test_sequent_leaves(self):
        trace = prove_sequent(parse_formula("P => P."))
        for leaf in trace.leaves():
            self.assertTrue(all(isinstance(f, Atom) for f in leaf.sequent.antecedent))
            self.assertTrue(all(isinstance(f, Atom) for f in leaf.sequent.succedent))

    def test_errors(self):
        with self.assertRaises(ParseError):
            parse_formula("P & & Q.")
        with self.assertRaises(LexicalError):
            parse_formula("P $ Q.")
        with self.assertRaises(ProverError):
            parse_formula("")


class TestProofReport(unittest.TestCase):
    """Test prove() and the report it returns."""

    def setUp(self):
        reset_config()

    def tearDown(self):
        reset_config()

    def test_theorem_report(self):
        report = prove("P => P.")
        self.assertTrue(report.is_theorem)
        self.assertEqual(report.status, PROVEN)
        rendered = report.render()
        self.assertTrue(rendered.endswith(PROVEN))
        self.assertIn("Clauses:  {P} & {!P}", rendered)
        self.assertIn("resolution: {P}, {!P} -> {}", rendered)
        self.assertIn("2\tP |= P\t[imply-right from 1]\t(closed)", rendered)

    def test_non_theorem_report(self):
        report = prove("P => Q.")
        self.assertEqual(report.status, NOT_PROVEN)
        self.assertIn("no inferences", report.render())
        self.assertEqual(report.summary().split("\n"), [
            "Formula: (P => Q)",
            "Status:  NOT A THEOREM",
            "Clauses: 2, steps: 0, sequents: 2",
        ])

    def test_arguments_override_config(self):
        report = prove("P & !P.", strategy="cancellation", table="uniform", order="reverse")
        self.assertTrue(report.is_theorem)
        self.assertEqual(report.refutation.table, "uniform")
        self.assertEqual(report.display_order, "reverse")

    def test_config_is_consulted(self):
        get_config().update({"resolution": {"strategy": "cancellation"}})
        self.assertTrue(prove("P & !P.").is_theorem)
        reset_config()
        self.assertFalse(prove("P & !P.").is_theorem)

    def test_json(self):
        report = prove("P | !P.")
        data = json.loads(report_to_json(report), object_hook=decode_core_object)
        self.assertEqual(data["formula"], report.formula)
        self.assertEqual(data["status"], PROVEN)
        self.assertEqual(len(data["trace"]["entries"]), 3)
        self.assertEqual(data["trace"]["entries"][2]["sequent"], report.trace[2].sequent)

    def test_syntax_errors_propagate(self):
        with self.assertRaises(ParseError):
            prove("P => .")


if __name__ == '__main__':
    unittest.main()
