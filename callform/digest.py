"""Canonical JSON form of a parse result and its SHA-256 fingerprint.

Uses stdlib json and hashlib only. Trees are walked with an explicit stack,
so arbitrarily deep parse results serialize without hitting the recursion
limit.
"""

import hashlib
import json
from typing import Any, Iterable

from .types import CallExpression, Node, NumberLiteral, StringLiteral


def sha256_hex(data: bytes) -> str:
    """SHA-256 hash of data as hex string."""
    return hashlib.sha256(data).hexdigest()


def _shell(node: Node) -> dict[str, Any]:
    if isinstance(node, CallExpression):
        return {"type": "CallExpression", "name": node.name, "params": []}
    if isinstance(node, NumberLiteral):
        return {"type": "NumberLiteral", "value": node.value}
    if isinstance(node, StringLiteral):
        return {"type": "StringLiteral", "value": node.value}
    raise TypeError(f"not an AST node: {node!r}")


def to_data(node: Node) -> dict[str, Any]:
    """Convert a node to plain dicts and lists, ready for json.dumps."""
    root = _shell(node)
    stack = [(node, root)]
    while stack:
        n, d = stack.pop()
        if isinstance(n, CallExpression):
            for p in n.params:
                child = _shell(p)
                d["params"].append(child)
                stack.append((p, child))
    return root


def _dumps(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def _push_items(stack: list, items) -> None:
    # Pushed in reverse so the first item pops first; commas between siblings.
    for i in range(len(items) - 1, -1, -1):
        stack.append(items[i])
        if i:
            stack.append(",")


def canonical_json(nodes: Iterable[Node]) -> str:
    """Compact, key-sorted JSON for a forest of nodes.

    Identical to json.dumps([to_data(n) ...], separators=(",", ":"),
    sort_keys=True, ensure_ascii=False).
    """
    out = ["["]
    stack: list = ["]"]
    _push_items(stack, list(nodes))
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, CallExpression):
            out.append('{"name":%s,"params":[' % _dumps(item.name))
            stack.append('],"type":"CallExpression"}')
            _push_items(stack, item.params)
        elif isinstance(item, NumberLiteral):
            out.append('{"type":"NumberLiteral","value":%s}' % _dumps(item.value))
        elif isinstance(item, StringLiteral):
            out.append('{"type":"StringLiteral","value":%s}' % _dumps(item.value))
        else:
            raise TypeError(f"not an AST node: {item!r}")
    return "".join(out)


def fingerprint(nodes: Iterable[Node]) -> str:
    """Hash a parse result by serializing it canonically, then SHA-256.

    Structurally equal trees always give the same fingerprint.
    """
    return sha256_hex(canonical_json(nodes).encode("utf-8"))
