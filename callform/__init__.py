from .tokenizer import tokenize, TokenizerError, UnterminatedString
from .parser import (
    parse,
    ParserError,
    MissingIdentifier,
    ExpectedIdentifier,
    MissingClosingParenthesis,
    UnexpectedClosingParenthesis,
    UnexpectedIdentifier,
    DepthExceeded,
)
from .reader import read
from .digest import to_data, canonical_json, fingerprint
from .types import (
    OpeningParenthesis,
    ClosingParenthesis,
    Number,
    String,
    Identifier,
    CallExpression,
    NumberLiteral,
    StringLiteral,
    Options,
    iter_nodes,
)

__all__ = [
    "tokenize", "TokenizerError", "UnterminatedString",
    "parse", "ParserError", "MissingIdentifier", "ExpectedIdentifier",
    "MissingClosingParenthesis", "UnexpectedClosingParenthesis",
    "UnexpectedIdentifier", "DepthExceeded",
    "read", "to_data", "canonical_json", "fingerprint",
    "OpeningParenthesis", "ClosingParenthesis", "Number", "String", "Identifier",
    "CallExpression", "NumberLiteral", "StringLiteral", "Options", "iter_nodes",
]
