"""Splitting a command line into tokens."""

from __future__ import annotations

from .tokens import Token, TokenType, operator_type

_BLANKS = " \t\n"
_OPERATORS = "><|"
_WORD_END = _BLANKS + _OPERATORS
_QUOTES = "'\""


def _word_end(text: str, start: int) -> int:
    """Return the index just past the word that begins at ``start``.

    Blanks and operators inside quotes belong to the word; an unclosed
    quote runs to the end of the text.
    """
    quote = None
    for index in range(start, len(text)):
        ch = text[index]
        if quote is None and ch in _QUOTES:
            quote = ch
        elif quote is not None and ch == quote:
            quote = None
        if quote is None and ch in _WORD_END:
            return index
    return len(text)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into word and operator tokens.

    Quotes are kept in the word values. An operator character standing
    alone at the very end of the text becomes an ERROR token.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while True:
        while pos < length and text[pos] in _BLANKS:
            pos += 1
        if pos >= length:
            return tokens
        if text[pos] in _OPERATORS:
            kind, advance = operator_type(text[pos:pos + 2])
            advance = advance or 1
            tokens.append(Token(kind, text[pos:pos + advance]))
            pos += advance
        else:
            end = _word_end(text, pos)
            tokens.append(Token(TokenType.WORD, text[pos:end]))
            pos = end