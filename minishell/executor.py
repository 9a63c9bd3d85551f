"""Walking a syntax tree and running what it describes."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from .parser import Node, NodeType


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def builtin_pwd(stream: Optional[TextIO] = None) -> None:
    """Write the current working directory followed by a newline.

    If the directory cannot be determined, an error is written to standard
    error instead.
    """
    try:
        cwd = os.getcwd()
    except OSError as exc:
        sys.stderr.write(f"pwd: {exc.strerror or exc}\n")
        return
    _target(stream).write(cwd + "\n")


def execute_node(node: Node, stream: Optional[TextIO] = None) -> None:
    """Run a single node, without its children."""
    out = _target(stream)
    if node.type is NodeType.COMMAND:
        if node.args and node.args[0] == "pwd":
            builtin_pwd(out)
    elif node.type is NodeType.PIPE:
        out.write("Executing pipe\n")
    elif node.type is NodeType.REDIRECTION:
        out.write("Executing redir \n")
    else:
        out.write(f"Unknown command type {node.type}")


def execute_ast(node: Optional[Node], stream: Optional[TextIO] = None) -> None:
    """Run a tree in post-order: left subtree, right subtree, then the node."""
    if node is None:
        return
    execute_ast(node.left, stream)
    execute_ast(node.right, stream)
    execute_node(node, stream)