"""The interactive read-parse-execute loop."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from .executor import execute_ast
from .lexer import tokenize
from .linereader import LineReader
from .parser import Node, parse_tokens
from .printer import display_ast

PROMPT = "minishell$>"
EXIT_FAILURE = 1


def debug_info(debug: bool = False) -> str:
    """Return the banner that says whether debug output is on."""
    level = int(bool(debug))
    state = "enabled" if debug else "disabled"
    return f"Debug mode is {state}. DEBUG_MODE = {level}.\n"


def _parse_line(line: str, stdout: TextIO, debug: bool) -> Optional[Node]:
    tree = parse_tokens(tokenize(line))
    if tree is None:
        stdout.write("Syntax error\n")
        return None
    if debug:
        display_ast(tree, 0, stdout)
    return tree


def run(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    debug: bool = False,
) -> int:
    """Read commands from ``stdin`` until it ends, running each in turn.

    Output goes to ``stdout``. The loop ends only when input runs out, and
    then the failure status is returned.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(debug_info(debug))
    reader = LineReader(stdin)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = reader.next_line()
        if line is None:
            stdout.write("\nExiting shell...\n")
            return EXIT_FAILURE
        tree = _parse_line(line, stdout, debug)
        if tree is None:
            continue
        execute_ast(tree, stdout)
        if debug:
            stdout.write("Entered: " + line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the shell on standard input and output."""
    parser = argparse.ArgumentParser(prog="minishell", description="A minimal shell.")
    parser.add_argument(
        "--debug", action="store_true", help="print the syntax tree of every command"
    )
    args = parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, args.debug)