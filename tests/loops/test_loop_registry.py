"""Tests for loops.registry module."""

import unittest

from propatlas.loops import (
    CancellationLoop, SaturationLoop, get_loop, list_loops
)


class TestLoopRegistry(unittest.TestCase):

    def test_default_loops(self):
        self.assertEqual(list_loops(), ["saturation", "cancellation"])
        self.assertIsInstance(get_loop("saturation"), SaturationLoop)
        self.assertIsInstance(get_loop("CANCELLATION"), CancellationLoop)

    def test_kwargs_are_forwarded(self):
        self.assertEqual(get_loop("saturation", max_steps=7).max_steps, 7)

    def test_unknown_loop(self):
        with self.assertRaises(ValueError):
            get_loop("otter")


if __name__ == '__main__':
    unittest.main()
