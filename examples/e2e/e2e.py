"""
callform End-to-End Example

Demonstrates the full pipeline:
1. Tokenize source text
2. Parse the tokens into an AST
3. Fingerprint the tree
4. Report a syntax error

Run: pip install -e . && python examples/e2e/e2e.py
"""

import json

from callform import tokenize, parse, fingerprint, to_data, read, ParserError

print("=== callform E2E Demo ===\n")

source = '(add 2 (subtract 4 2)) (print "done")'

# 1. Tokenize
tokens = tokenize(source)
print(f"1. Tokenized {len(tokens)} tokens")
for tok in tokens:
    print(f"   {tok}")
print()

# 2. Parse
ast = parse(tokens)
print(f"2. Parsed {len(ast)} top-level expressions")
print(json.dumps([to_data(n) for n in ast], indent=2))
print()

# 3. Fingerprint
print("3. Fingerprint")
print(f"   {fingerprint(ast)}\n")

# 4. Errors
print("4. Unbalanced input")
try:
    read("(add 1 (subtract 4 2)")
except ParserError as exc:
    print(f"   {type(exc).__name__}: {exc}")

print("\n=== Done ===")
