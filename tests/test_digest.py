import hashlib
import json

import pytest
from callform.digest import to_data, canonical_json, fingerprint, sha256_hex
from callform.reader import read
from callform.types import CallExpression, NumberLiteral, StringLiteral


def test_to_data_call():
    node = CallExpression("add", (NumberLiteral("2"), StringLiteral("x")))
    assert to_data(node) == {
        "type": "CallExpression",
        "name": "add",
        "params": [
            {"type": "NumberLiteral", "value": "2"},
            {"type": "StringLiteral", "value": "x"},
        ],
    }


def test_to_data_rejects_tokens():
    with pytest.raises(TypeError, match="not an AST node"):
        to_data("add")


def test_canonical_json_is_compact_and_sorted():
    out = canonical_json([NumberLiteral("1")])
    assert out == '[{"type":"NumberLiteral","value":"1"}]'


def test_canonical_json_round_trips_through_json():
    ast = read('(f "ü" (g 1))')
    assert json.loads(canonical_json(ast))[0]["params"][0]["value"] == "ü"


def test_fingerprint_matches_sha256_of_canonical_json():
    ast = read("(add 1 2)")
    expected = hashlib.sha256(canonical_json(ast).encode("utf-8")).hexdigest()
    assert fingerprint(ast) == expected
    assert sha256_hex(b"") == hashlib.sha256(b"").hexdigest()


def test_fingerprint_equal_for_equal_trees():
    assert fingerprint(read("(add 2 (subtract 4 2))")) == fingerprint(read("(add  2\n(subtract 4 2) )"))


def test_fingerprint_differs_on_structure():
    assert fingerprint(read("(f 1 2)")) != fingerprint(read("(f 1) 2"))
    assert fingerprint(read('(f 1)')) != fingerprint(read('(f "1")'))


def test_fingerprint_of_empty_program():
    assert fingerprint([]) == sha256_hex(b"[]")


def test_canonical_json_matches_json_dumps():
    ast = read('(f 1 "aé" (g) (h "q" 2)) 3 "x" "back\\slash"')
    expected = json.dumps(
        [to_data(n) for n in ast], separators=(",", ":"), sort_keys=True, ensure_ascii=False,
    )
    assert canonical_json(ast) == expected


def test_deep_tree_serializes():
    ast = read("(f " * 500 + "1" + ")" * 500)
    out = canonical_json(ast)
    assert out.count('"name":"f"') == 500
    assert len(fingerprint(ast)) == 64

    data = to_data(ast[0])
    depth = 0
    while data["type"] == "CallExpression":
        data = data["params"][0]
        depth += 1
    assert depth == 500
    assert data == {"type": "NumberLiteral", "value": "1"}
