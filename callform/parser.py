"""Recursive-descent parser from call-form tokens to an AST."""

from typing import Iterable, Optional

from .types import (
    CallExpression,
    ClosingParenthesis,
    Identifier,
    Node,
    Number,
    NumberLiteral,
    OpeningParenthesis,
    String,
    StringLiteral,
    Token,
)


class ParserError(SyntaxError):
    pass


class MissingIdentifier(ParserError):
    def __init__(self):
        super().__init__("missing identifier in CallExpression")


class ExpectedIdentifier(ParserError):
    def __init__(self, token: Token):
        super().__init__(f"expected identifier in CallExpression, but got {token!r}")
        self.token = token


class MissingClosingParenthesis(ParserError):
    def __init__(self):
        super().__init__("missing closing parenthesis")


class UnexpectedClosingParenthesis(ParserError):
    def __init__(self):
        super().__init__("unexpected closing parenthesis")


class UnexpectedIdentifier(ParserError):
    def __init__(self, name: str):
        super().__init__(f"unexpected identifier '{name}'")
        self.name = name


class DepthExceeded(ParserError):
    def __init__(self, max_depth: Optional[int] = None):
        if max_depth is None:
            super().__init__("max nesting depth exceeded")
        else:
            super().__init__(f"max nesting depth {max_depth} exceeded")
        self.max_depth = max_depth


class Cursor:
    """Single-token lookahead over a token list. Never moves backwards."""

    __slots__ = ("tokens", "pos")

    def __init__(self, tokens: Iterable[Token]):
        self.tokens = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok


def walk(cursor: Cursor, depth: int = 0, max_depth: Optional[int] = None) -> Optional[Node]:
    """Parse at most one node at the cursor.

    Returns None once the tokens are exhausted.
    """
    tok = cursor.peek()
    if tok is None:
        return None
    if isinstance(tok, Number):
        cursor.advance()
        return NumberLiteral(tok.value)
    if isinstance(tok, String):
        cursor.advance()
        return StringLiteral(tok.value)
    if isinstance(tok, ClosingParenthesis):
        raise UnexpectedClosingParenthesis()
    if isinstance(tok, Identifier):
        raise UnexpectedIdentifier(tok.value)

    # OpeningParenthesis
    cursor.advance()
    ident = cursor.advance()
    if ident is None:
        raise MissingIdentifier()
    if not isinstance(ident, Identifier):
        raise ExpectedIdentifier(ident)
    if max_depth is not None and depth + 1 > max_depth:
        raise DepthExceeded(max_depth)

    params: list[Node] = []
    while True:
        nxt = cursor.peek()
        if nxt is None:
            raise MissingClosingParenthesis()
        if isinstance(nxt, ClosingParenthesis):
            cursor.advance()
            break
        params.append(walk(cursor, depth + 1, max_depth))
    return CallExpression(ident.value, tuple(params))


def parse(tokens: Iterable[Token], *, max_depth: Optional[int] = None) -> list[Node]:
    """Parse a token sequence into its top-level nodes.

    Nesting deeper than the interpreter's recursion limit raises
    DepthExceeded even when max_depth is None.
    """
    cursor = Cursor(tokens)
    ast: list[Node] = []
    try:
        while True:
            node = walk(cursor, 0, max_depth)
            if node is None:
                break
            ast.append(node)
    except RecursionError:
        raise DepthExceeded(max_depth) from None
    return ast
