"""Theorem provers: resolution refutation and sequent-calculus search."""

from .resolution import RefutationResult, ResolutionRefuter, refute, resolve
from .sequent import SequentProver, prove_sequent

__all__ = [
    'RefutationResult', 'ResolutionRefuter', 'refute', 'resolve',
    'SequentProver', 'prove_sequent'
]
