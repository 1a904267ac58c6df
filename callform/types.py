from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

# Tokens: one frozen dataclass per kind, compared by value.


@dataclass(frozen=True)
class OpeningParenthesis:
    pass


@dataclass(frozen=True)
class ClosingParenthesis:
    pass


@dataclass(frozen=True)
class Number:
    value: str


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Identifier:
    value: str


Token = Union[OpeningParenthesis, ClosingParenthesis, Number, String, Identifier]


# AST nodes. A CallExpression owns its params; the tuple keeps the tree immutable.


@dataclass(frozen=True)
class NumberLiteral:
    value: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class CallExpression:
    name: str
    params: tuple["Node", ...] = ()


Node = Union[CallExpression, NumberLiteral, StringLiteral]


def iter_nodes(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node of a forest in pre-order."""
    stack = list(nodes)
    stack.reverse()
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, CallExpression):
            stack.extend(reversed(node.params))


@dataclass
class Options:
    strict_strings: bool = False
    max_depth: Optional[int] = None
