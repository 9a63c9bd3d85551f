"""Rendering a syntax tree as indented text."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .parser import Node, NodeType

_INDENT = "    "

_REDIRECT_NAMES = {
    ">": "REDIRECT OUT Node\n",
    ">>": "REDIRECT APPEND Node\n",
    "<": "REDIRECT IN Node\n",
    "<<": "REDIRECT HEREDOC Node\n",
}


def _pad(depth: int) -> str:
    return _INDENT * depth


def _format_command(node: Node, depth: int) -> str:
    lines = ["COMMAND Node:\n"]
    lines.extend(f"{_pad(depth)}    ├── Argument: {arg}\n" for arg in node.args)
    return "".join(lines)


def _format_redirect(node: Node) -> str:
    if not node.args:
        return "REDIRECTION Node with NO Operator\n"
    return _REDIRECT_NAMES.get(node.args[0], "UNKNOWN REDIRECTION Node\n")


def format_node(node: Optional[Node], depth: int = 0) -> str:
    """Describe one node; command arguments are indented by ``depth``."""
    if node is None:
        return ""
    if node.type is NodeType.COMMAND:
        return _format_command(node, depth)
    if node.type is NodeType.PIPE:
        return "PIPE Node\n"
    if node.type is NodeType.REDIRECTION:
        return _format_redirect(node)
    return "UNKNOWN Node\n"


def format_ast(node: Optional[Node], depth: int = 0) -> str:
    """Describe a whole tree, children indented below their parent."""
    if node is None:
        return ""
    parts = [_pad(depth), format_node(node, depth)]
    if node.left is not None:
        parts.append(f"{_pad(depth + 1)}├── Left:\n")
        parts.append(format_ast(node.left, depth + 2))
    if node.right is not None:
        parts.append(f"{_pad(depth + 1)}└── Right:\n")
        parts.append(format_ast(node.right, depth + 2))
    return "".join(parts)


def display_ast(
    node: Optional[Node], depth: int = 0, stream: Optional[TextIO] = None
) -> None:
    """Write the description of a tree to ``stream`` (standard output by default)."""
    (sys.stdout if stream is None else stream).write(format_ast(node, depth))