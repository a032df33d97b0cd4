import itertools

import pytest

from propcalc.logic.parser import parse


@pytest.mark.parametrize(
    "expression, function",
    [
        ("p and q", lambda p, q: p and q),
        ("p or q", lambda p, q: p or q),
        ("p xor q", lambda p, q: p != q),
        ("p nand q", lambda p, q: not (p and q)),
        ("p implies q", lambda p, q: (not p) or q),
        ("p iff q", lambda p, q: p == q),
        ("not p or q", lambda p, q: (not p) or q),
        ("not (p and q)", lambda p, q: not (p and q)),
    ],
)
def test_operators(expression, function):
    statement = parse(expression)
    for p, q in itertools.product([True, False], repeat=2):
        assert statement.evaluate({"p": p, "q": q}) == function(p, q)


@pytest.mark.parametrize(
    "text, value",
    [("true", True), ("t", True), ("Y", True), ("1", True)]
    + [("false", False), ("F", False), ("n", False), ("0", False)],
)
def test_literals(text, value):
    assert parse(text).evaluate() is value


def test_default_assignment_is_all_true():
    assert parse("p and q and r").evaluate() is True
    assert parse("p nand q").evaluate() is False


def test_repr():
    assert repr(parse("p and !q").root) == "(p and !q)"
    assert repr(parse("not p").root) == "not p"
    assert repr(parse("(a ∨ b) ⇒ c").root) == "((a ∨ b) ⇒ c)"


def test_to_latex():
    statement = parse("(p and not q) implies (r xor true)")
    assert statement.root.to_latex() == r"((p \land \lnot q) \implies (r \oplus \top))"
    assert parse("p | q").root.to_latex() == r"(p \uparrow q)"


def test_hash_matches_equality():
    assert hash(parse("p and q").root) == hash(parse("(p and q)").root)
    assert len({parse("p or q").root, parse("p or q").root, parse("q or p").root}) == 2
