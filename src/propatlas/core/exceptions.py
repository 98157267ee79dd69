from enum import Enum


class ProverError(Exception):
    """Base class for every failure raised by the proving pipeline."""


class LexicalError(ProverError):
    def __init__(self, char, position, reason="unexpected character"):
        if char:
            message = f"{reason}: {char!r} at position {position}"
        else:
            message = f"{reason} at position {position}"
        super().__init__(message)
        self.char = char
        self.position = position
        self.reason = reason


class ParseErrorKind(Enum):
    INSUFFICIENT_OPERANDS = "insufficient-operands"
    UNMATCHED_BRACKET = "unmatched-bracket"
    UNEXPECTED_TOKEN = "unexpected-token"


class ParseError(ProverError):
    def __init__(self, kind, token=None, detail=""):
        message = kind.value
        if token is not None:
            message += f" near {token.lexeme!r} at position {token.position}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.kind = kind
        self.token = token
        self.detail = detail


class IllegalFormulaError(ProverError):
    def __init__(self, formula):
        super().__init__(f"Expected formula, got {formula!r}")
        self.formula = formula


class SaturationLimitError(ProverError):
    def __init__(self, max_steps, processed, unprocessed):
        super().__init__(f"No verdict after {max_steps} given clauses "
                         f"({processed} processed, {unprocessed} unprocessed)")
        self.max_steps = max_steps
        self.processed = processed
        self.unprocessed = unprocessed
