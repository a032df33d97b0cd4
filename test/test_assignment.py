import pytest

from propcalc.logic.assignment import Variable, VariableAssignment
from propcalc.logic.errors import EvaluationError, UndefinedVariable
from propcalc.logic.parser import parse


def test_default_assignment():
    statement = parse("q and p")
    assignment = VariableAssignment.default(statement)
    # entries follow the sorted variable order
    assert list(assignment) == [Variable("p"), Variable("q")]
    assert all(assignment.values())
    assert assignment["p"] is True
    assert assignment[Variable("q")] is True


def test_overrides_merge_onto_default():
    statement = parse("p and q and r")
    assignment = VariableAssignment.from_overrides(statement, {"q": False})
    assert dict(assignment.items()) == {
        Variable("p"): True,
        Variable("q"): False,
        Variable("r"): True,
    }

    with pytest.raises(UndefinedVariable) as info:
        VariableAssignment.from_overrides(statement, {"x": False})
    assert info.value.name == "x"


def test_with_value_returns_copy():
    statement = parse("p or q")
    assignment = VariableAssignment.default(statement)
    updated = assignment.with_value("p", False)
    assert assignment["p"] is True
    assert updated["p"] is False
    assert updated != assignment

    with pytest.raises(UndefinedVariable):
        assignment.with_value(Variable("z"), True)


def test_copy_and_equality():
    statement = parse("p xor q")
    assignment = VariableAssignment.from_overrides(statement, {"p": False})
    copy = assignment.copy()
    assert copy == assignment
    assert hash(copy) == hash(assignment)
    assert copy is not assignment

    # assignments of different statements over the same variables are equal
    other = VariableAssignment.from_overrides(parse("q and p"), {"p": False})
    assert other == assignment


def test_partial_assignment():
    statement = parse("p and q")
    assignment = VariableAssignment.partial(statement, {"p": True})
    assert len(assignment) == 1
    assert "p" in assignment
    assert "q" not in assignment
    assert assignment.get("q") is None
    assert assignment.variables == (Variable("p"), Variable("q"))

    with pytest.raises(UndefinedVariable) as info:
        assignment["q"]
    assert info.value.name == "q"


def test_evaluate_with_missing_variable():
    statement = parse("p and q")
    partial = VariableAssignment.partial(statement, {"p": True})
    with pytest.raises(UndefinedVariable) as info:
        statement.evaluate(partial)
    assert info.value.name == "q"
    assert isinstance(info.value, EvaluationError)

    # the default-and-override path fills q with true
    assert statement.evaluate({"p": True}) is True
    assert statement.evaluate({"q": False}) is False


def test_unknown_variable_in_constructor():
    statement = parse("p")
    with pytest.raises(UndefinedVariable):
        VariableAssignment(statement.variables, {Variable("q"): True})


def test_error_message():
    statement = parse("p")
    with pytest.raises(UndefinedVariable) as info:
        statement.evaluate({"x": True})
    assert str(info.value) == "Variable 'x' is not defined for statement 'p'"


def test_repr():
    statement = parse("b or a")
    assignment = VariableAssignment.from_overrides(statement, {"b": False})
    assert repr(assignment) == "a = True | b = False"
