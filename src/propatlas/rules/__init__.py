"""Inference rules for refutation."""

from .base import Rule, RuleApplication
from .resolution import ResolutionRule
from .subsumption import SubsumptionRule, subsumes

__all__ = [
    'Rule', 'RuleApplication',
    'ResolutionRule', 'SubsumptionRule', 'subsumes'
]
