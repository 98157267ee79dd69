"""Tokenizer for propositional formula text.

A formula is written with single-letter atoms (``P``, ``Q3``, ``R12``), the
connectives ``!``, ``&``, ``|``, ``=>`` and ``<=>``, parentheses, and is terminated
by ``.``. The token stream is implicitly wrapped in one outer bracket pair: a
leading ``(`` is emitted first and the terminator becomes the matching ``)``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from propatlas.core.exceptions import LexicalError

logger = logging.getLogger(__name__)

# Longer suffixes are reserved for generated names.
MAX_ATOM_DIGITS = 2

_lexer = Lark(r"""
    start : _token*
    _token : ATOM | LPAR | RPAR | NOT | AND | OR | IMPLY | IFF | END

    ATOM : /[A-Z][0-9]*/
    LPAR : "("
    RPAR : ")"
    NOT : "!"
    AND : "&"
    OR : "|"
    IMPLY : "=>"
    IFF : "<=>"
    END : "."

    %import common.WS
    %ignore WS
""", parser="lalr", lexer="basic")


class TokenCategory(Enum):
    ATOM = "atom"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    NOT = "!"
    AND = "&"
    OR = "|"
    IMPLY = "=>"
    IFF = "<=>"

    @property
    def is_binary(self) -> bool:
        return self in (TokenCategory.AND, TokenCategory.OR,
                        TokenCategory.IMPLY, TokenCategory.IFF)


_CATEGORIES = {
    "ATOM": TokenCategory.ATOM,
    "LPAR": TokenCategory.LEFT_PAREN,
    "RPAR": TokenCategory.RIGHT_PAREN,
    "NOT": TokenCategory.NOT,
    "AND": TokenCategory.AND,
    "OR": TokenCategory.OR,
    "IMPLY": TokenCategory.IMPLY,
    "IFF": TokenCategory.IFF,
}


@dataclass(frozen=True)
class Token:
    lexeme: str
    category: TokenCategory
    position: int = 0

    def __repr__(self):
        return self.lexeme


def tokenize(text: str) -> List[Token]:
    """Split formula text into tokens.

    Args:
        text: Formula text terminated by ``.``; anything after the terminator is ignored

    Returns:
        The token list, starting with the implicit ``(`` and ending with the
        ``)`` produced by the terminator

    Raises:
        LexicalError: On an unknown character, a ``<`` or ``=`` that does not
            start a connective, an atom suffix longer than two digits, or a
            missing terminator
    """
    tokens = [Token("(", TokenCategory.LEFT_PAREN, 0)]
    try:
        for lexed in _lexer.lex(text):
            if lexed.type == "END":
                tokens.append(Token(")", TokenCategory.RIGHT_PAREN, lexed.start_pos))
                logger.debug("Scanned %d tokens from %r", len(tokens), text)
                return tokens
            if lexed.type == "ATOM" and len(lexed.value) > 1 + MAX_ATOM_DIGITS:
                raise LexicalError(lexed.value, lexed.start_pos,
                                   f"atom suffix longer than {MAX_ATOM_DIGITS} digits")
            tokens.append(Token(str(lexed.value), _CATEGORIES[lexed.type], lexed.start_pos))
    except UnexpectedCharacters as e:
        position = e.pos_in_stream
        if e.char in "<=":
            raise LexicalError(e.char, position, "malformed connective") from e
        raise LexicalError(e.char, position) from e
    raise LexicalError("", len(text), "missing terminator '.'")
