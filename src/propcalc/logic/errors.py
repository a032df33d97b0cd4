from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from propcalc.logic.tokens import Token, TokenType


class PropcalcError(Exception):
    """Base class of all errors raised while compiling or evaluating statements."""


class CompileError(PropcalcError, ValueError):
    """The text could not be compiled into a statement. No partial result exists."""


class UnknownToken(CompileError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Unknown token {word!r}")


class TokenMismatch(CompileError):
    def __init__(self, expected: "TokenType", found: "Token", position: int):
        self.expected = expected
        self.found = found
        self.position = position
        super().__init__(
            f"Required {expected.name}, but found {found.type.name} "
            f"{found.value!r} at token index {position}"
        )


class UnexpectedEndOfInput(CompileError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"Expected an expression at token index {position}, but the text ended"
        )


class MisplacedToken(CompileError):
    def __init__(self, token: "Token", position: int):
        self.token = token
        self.position = position
        super().__init__(
            f"Incorrectly placed token {token.value!r} at token index {position}"
        )


class ExpressionTooDeep(CompileError):
    def __init__(self, limit: int, position: int):
        self.limit = limit
        self.position = position
        super().__init__(
            f"Expression exceeds the depth limit of {limit} at token index {position}"
        )


class EvaluationError(PropcalcError, KeyError):
    """A statement could not be evaluated under the given assignment."""

    def __str__(self) -> str:
        # KeyError would quote the message
        return str(self.args[0]) if self.args else ""


class UndefinedVariable(EvaluationError):
    def __init__(self, name: str, statement: str | None = None):
        self.name = name
        self.statement = statement
        message = f"Variable {name!r} is not defined"
        if statement is not None:
            message += f" for statement {statement!r}"
        super().__init__(message)
