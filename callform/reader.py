"""Top-level read API: source text straight to an AST."""

import logging
from typing import Any, Optional

from .parser import parse
from .tokenizer import tokenize
from .types import Node, Options

logger = logging.getLogger(__name__)


def read(source: str, options: Optional[Any] = None) -> list[Node]:
    """Tokenize and parse source text.

    Args:
        source: Program text
        options: Either an Options dataclass or a dict with keys:
                 strict_strings, max_depth

    Returns:
        The top-level nodes, in source order.

    Raises:
        TokenizerError, ParserError
    """
    if options is None:
        opts = Options()
    elif isinstance(options, dict):
        # Unknown keys raise TypeError.
        opts = Options(**options)
    else:
        opts = options

    tokens = tokenize(source, strict=opts.strict_strings)
    logger.debug("tokenized %d characters into %d tokens", len(source), len(tokens))
    ast = parse(tokens, max_depth=opts.max_depth)
    logger.debug("parsed %d top-level nodes", len(ast))
    return ast
