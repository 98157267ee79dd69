"""Operator-precedence parser building a Formula from tokens.

Two stacks drive the parse: pending connectives (with ``(`` as a barrier) and
finished subformulas. Both live only for the duration of one ``parse`` call.

Precedence, loosest to tightest: ``<=> < => < | < & < !``. A binary connective
first reduces every pending connective of higher or equal precedence, so
binary connectives associate to the left.
"""

import logging
from typing import List, Sequence

from propatlas.core.exceptions import ParseError, ParseErrorKind
from propatlas.core.logic import (
    Connective, NOT_PRECEDENCE, Atom, Not, Binary, Formula
)
from .tokenizer import Token, TokenCategory, tokenize

logger = logging.getLogger(__name__)

_BINARY = {
    TokenCategory.AND: Connective.AND,
    TokenCategory.OR: Connective.OR,
    TokenCategory.IMPLY: Connective.IMPLY,
    TokenCategory.IFF: Connective.IFF,
}


def _precedence(token: Token) -> int:
    if token.category == TokenCategory.NOT:
        return NOT_PRECEDENCE
    return _BINARY[token.category].precedence


def _reduce_one(connectives: List[Token], formulas: List[Formula]):
    """Pop one connective and combine it with its operands."""
    op = connectives.pop()
    if op.category == TokenCategory.NOT:
        if not formulas:
            raise ParseError(ParseErrorKind.INSUFFICIENT_OPERANDS, op)
        formulas.append(Not(formulas.pop()))
        return
    if len(formulas) < 2:
        raise ParseError(ParseErrorKind.INSUFFICIENT_OPERANDS, op)
    right = formulas.pop()
    left = formulas.pop()
    formulas.append(Binary(_BINARY[op.category], left, right))


def _reduce_group(connectives: List[Token], formulas: List[Formula], closing: Token):
    """Reduce back to the innermost ``(`` and discard it."""
    while connectives and connectives[-1].category != TokenCategory.LEFT_PAREN:
        _reduce_one(connectives, formulas)
    if not connectives:
        raise ParseError(ParseErrorKind.UNMATCHED_BRACKET, closing)
    connectives.pop()


def parse(tokens: Sequence[Token]) -> Formula:
    """Parse a token sequence into exactly one Formula.

    Raises:
        ParseError: With kind ``UNMATCHED_BRACKET``, ``INSUFFICIENT_OPERANDS``
            (including a stream that holds no formula at all) or
            ``UNEXPECTED_TOKEN`` (an operand where a connective belongs, or
            leftover formulas after the final reduce)
    """
    connectives: List[Token] = []
    formulas: List[Formula] = []
    # True while the next token must start an operand
    expect_operand = True

    last = len(tokens) - 1
    for position, token in enumerate(tokens):
        category = token.category
        if category == TokenCategory.LEFT_PAREN:
            if not expect_operand:
                raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN, token)
            connectives.append(token)
        elif category == TokenCategory.ATOM:
            if not expect_operand:
                raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN, token)
            formulas.append(Atom(token.lexeme))
            expect_operand = False
        elif category == TokenCategory.NOT:
            if not expect_operand:
                raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN, token)
            connectives.append(token)
        elif category.is_binary:
            while (connectives
                   and connectives[-1].category != TokenCategory.LEFT_PAREN
                   and _precedence(connectives[-1]) >= _precedence(token)):
                _reduce_one(connectives, formulas)
            connectives.append(token)
            expect_operand = True
        elif category == TokenCategory.RIGHT_PAREN:
            _reduce_group(connectives, formulas, token)
            # Only the terminator may close the implicit outer bracket
            if not connectives and position < last:
                raise ParseError(ParseErrorKind.UNMATCHED_BRACKET, token)
            expect_operand = False
        else:
            raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN, token)

    while connectives:
        if connectives[-1].category == TokenCategory.LEFT_PAREN:
            raise ParseError(ParseErrorKind.UNMATCHED_BRACKET, connectives[-1])
        _reduce_one(connectives, formulas)

    if not formulas:
        raise ParseError(ParseErrorKind.INSUFFICIENT_OPERANDS, detail="empty formula")
    if len(formulas) > 1:
        raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN,
                         detail=f"{len(formulas)} formulas left after reduction")

    logger.debug("Parsed %s", formulas[0])
    return formulas[0]


def parse_formula(text: str) -> Formula:
    """Tokenize and parse formula text such as ``"P => Q."``."""
    return parse(tokenize(text))
