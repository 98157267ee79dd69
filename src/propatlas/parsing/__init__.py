"""Formula text to Formula tree."""

from .tokenizer import Token, TokenCategory, tokenize
from .parser import parse, parse_formula

__all__ = [
    'Token', 'TokenCategory', 'tokenize',
    'parse', 'parse_formula'
]
