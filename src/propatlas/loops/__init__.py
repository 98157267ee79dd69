"""Refutation loops over clause sets."""

from .base import Loop, LoopResult
from .saturation import SaturationLoop
from .cancellation import CancellationLoop
from .registry import get_loop, list_loops

__all__ = [
    'Loop', 'LoopResult',
    'SaturationLoop', 'CancellationLoop',
    'get_loop', 'list_loops'
]
