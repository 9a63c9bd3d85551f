"""Checks that reject command lines the shell cannot handle yet."""

from __future__ import annotations

from typing import Optional


class ValidationError(ValueError):
    """Raised when a command line is rejected."""


def check_unclosed_quotes(text: str) -> None:
    """Raise if ``text`` holds an odd number of single or double quotes."""
    if text.count("'") % 2:
        raise ValidationError("Unclosed single quote")
    if text.count('"') % 2:
        raise ValidationError("Unclosed double quote")


def check_invalid_special_characters(text: str) -> None:
    """Raise if ``text`` contains a semicolon."""
    if ";" in text:
        raise ValidationError("Semicolon not allowed")


def validate_input(text: Optional[str]) -> str:
    """Return ``text`` unchanged if it passes every check.

    Missing input, unbalanced quotes, semicolons, redirections, here-documents
    and pipes are all rejected with :class:`ValidationError`.
    """
    if text is None:
        raise ValidationError("No input")
    check_unclosed_quotes(text)
    check_invalid_special_characters(text)
    if text.startswith("<<"):
        raise ValidationError("Heredoc not supported")
    if ">" in text or "<" in text:
        raise ValidationError("Redirection not supported")
    if "|" in text:
        raise ValidationError("Pipe not supported")
    return text