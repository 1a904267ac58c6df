"""CLI: python -m callform <program>"""

import argparse
import logging
import sys
from pathlib import Path

from .digest import canonical_json, fingerprint
from .reader import read
from .tokenizer import tokenize
from .types import Options

logger = logging.getLogger("callform")


def main(argv=None):
    ap = argparse.ArgumentParser(prog="callform", description="Parse a call-form program into an AST")
    ap.add_argument("file", help="program source file")
    ap.add_argument("--tokens", action="store_true", help="dump the token stream and exit")
    ap.add_argument("--digest", action="store_true", help="print the AST fingerprint instead of the tree")
    ap.add_argument("--strict", action="store_true", help="reject unterminated string literals")
    ap.add_argument("--max-depth", type=int, default=None, help="limit call-form nesting")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source = Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"cannot read {args.file}: {exc}", file=sys.stderr)
        return 1
    logger.debug("read %s", args.file)
    opts = Options(strict_strings=args.strict, max_depth=args.max_depth)

    try:
        if args.tokens:
            for tok in tokenize(source, strict=opts.strict_strings):
                print(tok)
            return 0
        ast = read(source, opts)
    except SyntaxError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    if args.digest:
        print(fingerprint(ast))
    else:
        print(canonical_json(ast))
    return 0


if __name__ == "__main__":
    sys.exit(main())
