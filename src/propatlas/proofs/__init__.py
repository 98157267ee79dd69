"""
Proof representation: saturation state and sequent proof traces.
"""

from .state import ProofState, LiteralClause
from .trace import TraceEntry, ProofTrace, DISPLAY_ORDERS

__all__ = [
    'ProofState', 'LiteralClause',
    'TraceEntry', 'ProofTrace', 'DISPLAY_ORDERS'
]
