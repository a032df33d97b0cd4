from enum import Enum, IntEnum, auto
from typing import NamedTuple


class TokenCategory(Enum):
    GROUPING = auto()
    LITERAL = auto()
    VARIABLE = auto()
    OP_UNARY_PREFIX = auto()
    OP_BINARY_INFIX = auto()


class Precedence(IntEnum):
    """Binding strength of operators, loosest first."""

    LOWEST = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    HIGHEST = 4

    def next(self) -> "Precedence":
        return Precedence(self + 1)


class TokenType(Enum):
    """Token kinds in lexing priority order.

    Each member carries the regular expression for its aliases, its category and,
    for operators, its precedence. The opening parenthesis has no fixed pattern
    because it depends on the configured highlight character.
    """

    NOT = (
        r"(¬)|(!)|(~)|(\bl?not\b)|(\\l?not\b)",
        TokenCategory.OP_UNARY_PREFIX,
        Precedence.HIGHEST,
    )
    AND = (
        r"(∧)|(&&)|(&)|(\bl?and\b)|(\\l?and\b)",
        TokenCategory.OP_BINARY_INFIX,
        Precedence.HIGH,
    )
    # a single "|" is nand, so "||" has to be tried first
    OR = (
        r"(∨)|(\|\|)|(\bl?or\b)|(\\l?or\b)",
        TokenCategory.OP_BINARY_INFIX,
        Precedence.HIGH,
    )
    XOR = (
        r"(⊕)|(\bl?xor\b)|(\\l?xor\b)|(\\oplus\b)",
        TokenCategory.OP_BINARY_INFIX,
        Precedence.HIGH,
    )
    NAND = (
        r"(\bsh\b)|(\bl?nand\b)|(\\l?nand\b)|(\|)",
        TokenCategory.OP_BINARY_INFIX,
        Precedence.HIGH,
    )
    IMPLIES = (
        r"(=?⇒)|(->)|(=>)|(\bimplies\b)|(\\implies\b)",
        TokenCategory.OP_BINARY_INFIX,
        Precedence.MEDIUM,
    )
    IFF = (
        r"(⇔)|(<->)|(<=>)|(\bl?iff\b)|(\\l?iff\b)",
        TokenCategory.OP_BINARY_INFIX,
        Precedence.LOW,
    )
    OPEN_PAREN = (None, TokenCategory.GROUPING, None)
    CLOSE_PAREN = (r"\)", TokenCategory.GROUPING, None)
    BOOLEAN = (
        r"(\btrue\b)|(\bfalse\b)|(\b[tTfF01yYnN]\b)",
        TokenCategory.LITERAL,
        None,
    )
    VARIABLE = (r"\b\w\b", TokenCategory.VARIABLE, None)

    def __init__(
        self,
        pattern: str | None,
        category: TokenCategory,
        precedence: Precedence | None,
    ):
        self.pattern = pattern
        self.category = category
        self.precedence = precedence

    @property
    def is_infix(self) -> bool:
        return self.category is TokenCategory.OP_BINARY_INFIX


TRUE_LITERALS = frozenset({"true", "t", "T", "y", "Y", "1"})


class Token(NamedTuple):
    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"{self.type.name}:{self.value}"
