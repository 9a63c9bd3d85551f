"""A small interactive shell: lexer, parser, tree printer, executor and helpers."""

__version__ = "0.1.0"