"""Public API for the propcalc package."""

from collections.abc import Mapping

from propcalc.config import DisplayOptions, SyntaxOptions
from propcalc.hydra_utils.utils import register_custom_resolvers
from propcalc.logic import (
    CompileError,
    EvaluationError,
    Statement,
    UndefinedVariable,
    VariableAssignment,
    parse,
)
from propcalc.table import TruthTable
from propcalc.table.truth_table import Backend

register_custom_resolvers()


def evaluate(
    statement: Statement,
    assignment: VariableAssignment | Mapping[str, bool] | None = None,
) -> bool:
    """Evaluate ``statement``; see :meth:`Statement.evaluate`."""
    return statement.evaluate(assignment)


def truth_table(statement: Statement, backend: Backend = "python") -> TruthTable:
    return statement.truth_table(backend=backend)


__all__ = [
    "CompileError",
    "DisplayOptions",
    "EvaluationError",
    "Statement",
    "SyntaxOptions",
    "TruthTable",
    "UndefinedVariable",
    "VariableAssignment",
    "evaluate",
    "parse",
    "truth_table",
]
