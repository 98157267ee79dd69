"""Clause normal form."""

from .tables import (
    Expansion, ExpansionTable, ClassicalTable, UniformTable,
    get_expansion_table, list_expansion_tables
)
from .normalizer import CNFNormalizer, normalize

__all__ = [
    'Expansion', 'ExpansionTable', 'ClassicalTable', 'UniformTable',
    'get_expansion_table', 'list_expansion_tables',
    'CNFNormalizer', 'normalize'
]
