"""Tests for proofs.trace module."""

import unittest

from propatlas.core.logic import Atom, Not, Sequent
from propatlas.proofs.trace import ProofTrace, SEPARATOR, DISPLAY_ORDERS

P, Q = Atom("P"), Atom("Q")


class TestProofTrace(unittest.TestCase):
    """Test recording and displaying sequents."""

    def setUp(self):
        self.trace = ProofTrace()
        self.root = self.trace.record(Sequent((), (Not(P),)))
        self.left = self.trace.record(Sequent((P,), ()), self.root.index, "not-right")
        self.right = self.trace.record(Sequent((Q,), (Q,)), self.root.index, "made-up")

    def test_record(self):
        self.assertEqual(len(self.trace), 3)
        self.assertEqual(self.trace.root, self.root)
        self.assertEqual(self.left.number, 2)
        self.assertEqual(self.trace[2].parent, 0)
        self.assertEqual([e.index for e in self.trace], [0, 1, 2])

    def test_record_unknown_parent(self):
        with self.assertRaises(IndexError):
            self.trace.record(Sequent(), 10)

    def test_graph(self):
        self.assertEqual(self.trace.children(0), [self.left, self.right])
        self.assertEqual(self.trace.leaves(), [self.left, self.right])
        self.assertEqual(self.trace.branch_count(), 1)
        self.assertEqual(self.trace.graph.edges[0, 1]["rule"], "not-right")

    def test_display_order_is_separate_from_creation_order(self):
        self.assertEqual(self.trace.display("reverse"), [self.right, self.left, self.root])
        self.assertEqual(self.trace.display(), [self.root, self.left, self.right])
        self.assertEqual(self.trace.entries, [self.root, self.left, self.right])
        self.assertEqual(DISPLAY_ORDERS, ("chronological", "reverse"))

    def test_unknown_display_order(self):
        with self.assertRaises(ValueError):
            self.trace.display("sideways")

    def test_format(self):
        lines = self.trace.format().split("\n")
        self.assertEqual(lines[0], "1\t|= !P")
        self.assertEqual(lines[1], SEPARATOR)
        self.assertEqual(lines[2], "2\tP |=\t[not-right from 1]\t(open)")
        self.assertEqual(lines[4], "3\tQ |= Q\t[made-up from 1]\t(closed)")
        self.assertEqual(len(lines), 6)
        self.assertTrue(self.trace.format("reverse").startswith("3\t"))

    def test_to_dict(self):
        data = self.trace.to_dict()
        self.assertEqual(data["leaves"], [1, 2])
        self.assertEqual(data["entries"][1]["rule"], "not-right")
        self.assertEqual(repr(self.trace), "ProofTrace(entries=3, leaves=2)")

    def test_empty_trace(self):
        trace = ProofTrace()
        self.assertIsNone(trace.root)
        self.assertEqual(trace.format(), "")


if __name__ == '__main__':
    unittest.main()
