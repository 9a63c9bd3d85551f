"""Token kinds and the classification of operator characters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

MAX_TOKENS = 100


class TokenType(Enum):
    """Kinds of lexical token."""

    WORD = auto()
    PIPE = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    REDIR_APPEND = auto()
    REDIR_HEREDOC = auto()
    SINGLE_QUOTE = auto()
    DOUBLE_QUOTE = auto()
    EOF = auto()
    ERROR = auto()
    NULL = auto()


@dataclass
class Token:
    """A token of input with its kind and text."""

    type: TokenType = TokenType.NULL
    value: Optional[str] = None
    counter: int = 0


_CHAR_TYPES = {
    "|": TokenType.PIPE,
    "'": TokenType.SINGLE_QUOTE,
    '"': TokenType.DOUBLE_QUOTE,
    ">": TokenType.REDIR_OUT,
    "<": TokenType.REDIR_IN,
}

_DOUBLE_OPERATORS = {
    ">>": TokenType.REDIR_APPEND,
    "<<": TokenType.REDIR_HEREDOC,
}


def char_type(c: str) -> TokenType:
    """Return the token kind a single character stands for; WORD otherwise."""
    return _CHAR_TYPES.get(c, TokenType.WORD)


def operator_type(text: str) -> tuple[TokenType, int]:
    """Classify the operator at the start of ``text``.

    Returns the token kind and how many characters it spans. Text shorter
    than two characters, an operator with nothing after it, gives
    ``(TokenType.ERROR, 0)``.
    """
    if len(text) < 2:
        return TokenType.ERROR, 0
    double = _DOUBLE_OPERATORS.get(text[:2])
    if double is not None:
        return double, 2
    return char_type(text[0]), 1