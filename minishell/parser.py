"""Building a syntax tree of commands, pipes and redirections from tokens."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto
from itertools import takewhile
from typing import Optional

from .tokens import Token, TokenType

_REDIRECTS = frozenset(
    {
        TokenType.REDIR_IN,
        TokenType.REDIR_OUT,
        TokenType.REDIR_APPEND,
        TokenType.REDIR_HEREDOC,
    }
)


class NodeType(Enum):
    """Kinds of syntax tree node."""

    COMMAND = auto()
    PIPE = auto()
    REDIRECTION = auto()


@dataclass
class Node:
    """A syntax tree node.

    A command holds its words in ``args``; a pipe or redirection holds its
    operator as the first argument and its operands as children.
    """

    type: NodeType
    args: list[str] = field(default_factory=list)
    left: Optional[Node] = None
    right: Optional[Node] = None


def is_redirect(token_type: TokenType) -> bool:
    """True for the four redirection token kinds."""
    return token_type in _REDIRECTS


def count_args(tokens: Iterable[Token]) -> int:
    """Count the WORD tokens at the start of ``tokens``."""
    return sum(1 for _ in takewhile(lambda t: t.type is TokenType.WORD, tokens))


def _args(value: Optional[str]) -> list[str]:
    return [] if value is None else [value]


def _add_word(current: Optional[Node], token: Token) -> Node:
    if current is None:
        return Node(NodeType.COMMAND, _args(token.value))
    if token.value is not None:
        current.args.append(token.value)
    return current


def parse_tokens(tokens: Iterable[Token]) -> Optional[Node]:
    """Build a syntax tree from ``tokens``; None when nothing was parsed.

    Pipes associate to the left. A redirection takes the command before it
    as its left child and the token after it as a one-word command on its
    right. A pipe with no command before it is ignored.
    """
    root: Optional[Node] = None
    current: Optional[Node] = None
    stream = iter(tokens)
    for token in stream:
        if token.type is TokenType.WORD:
            current = _add_word(current, token)
        elif token.type is TokenType.PIPE:
            if current is None:
                continue
            pipe = Node(NodeType.PIPE, _args(token.value))
            if root is None:
                pipe.left = current
            else:
                pipe.left = root
                root.right = current
            root = pipe
            current = None
        elif is_redirect(token.type):
            current = Node(NodeType.REDIRECTION, _args(token.value), left=current)
            target = next(stream, None)
            if target is None:
                break
            current.right = Node(NodeType.COMMAND, _args(target.value))
    if root is not None:
        if current is not None:
            root.right = current
        return root
    return current