from propcalc.logic.assignment import Variable, VariableAssignment
from propcalc.logic.errors import (
    CompileError,
    EvaluationError,
    ExpressionTooDeep,
    MisplacedToken,
    PropcalcError,
    TokenMismatch,
    UndefinedVariable,
    UnexpectedEndOfInput,
    UnknownToken,
)
from propcalc.logic.parser import Parser, parse
from propcalc.logic.statement import Statement

__all__ = [
    "CompileError",
    "EvaluationError",
    "ExpressionTooDeep",
    "MisplacedToken",
    "Parser",
    "PropcalcError",
    "Statement",
    "TokenMismatch",
    "UndefinedVariable",
    "UnexpectedEndOfInput",
    "UnknownToken",
    "Variable",
    "VariableAssignment",
    "parse",
]
