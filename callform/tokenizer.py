"""Lexical scanner for call-form source text."""

from .types import (
    ClosingParenthesis,
    Identifier,
    Number,
    OpeningParenthesis,
    String,
    Token,
)

DIGITS = "0123456789"

# Unicode White_Space property. Narrower than str.isspace, which also accepts
# the U+001C..U+001F separators.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class TokenizerError(SyntaxError):
    def __init__(self, character: str, offset: int, message: str = ""):
        super().__init__(message or f"cannot understand character {character!r} at offset {offset}")
        self.character = character
        self.offset = offset


class UnterminatedString(TokenizerError):
    def __init__(self, offset: int):
        super().__init__('"', offset, f"unterminated string starting at offset {offset}")


def tokenize(src: str, *, strict: bool = False) -> list[Token]:
    """Split source text into tokens.

    Strings run to the next double quote. When the input ends first the
    string is closed implicitly, unless ``strict`` is set.
    """
    tokens: list[Token] = []
    i = 0
    n = len(src)
    while i < n:
        ch = src[i]
        if ch == "(":
            tokens.append(OpeningParenthesis())
            i += 1
        elif ch == ")":
            tokens.append(ClosingParenthesis())
            i += 1
        elif ch in WHITESPACE:
            i += 1
        elif ch in DIGITS:
            j = i + 1
            while j < n and src[j] in DIGITS:
                j += 1
            tokens.append(Number(src[i:j]))
            i = j
        elif ch == '"':
            j = src.find('"', i + 1)
            if j == -1:
                if strict:
                    raise UnterminatedString(i)
                tokens.append(String(src[i + 1:]))
                i = n
            else:
                tokens.append(String(src[i + 1:j]))
                i = j + 1
        elif ch.isalpha():
            j = i + 1
            while j < n and src[j].isalpha():
                j += 1
            tokens.append(Identifier(src[i:j]))
            i = j
        else:
            raise TokenizerError(ch, i)
    return tokens
