from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from propcalc.logic.assignment import Variable
from propcalc.logic.tokens import TRUE_LITERALS, Token, TokenType

if TYPE_CHECKING:
    from propcalc.logic.assignment import VariableAssignment


class Node(ABC):
    """A node of the syntax tree of a statement.

    Nodes are compared structurally: same node class, same token lexeme and equal
    children. Every node records its depth so that parsers can bound recursion.
    """

    def __init__(self, token: Token):
        self.token = token

    @property
    def children(self) -> tuple["Node", ...]:
        return ()

    @property
    def depth(self) -> int:
        return 1

    @abstractmethod
    def eval(self, assignment: "VariableAssignment") -> bool:
        pass

    @abstractmethod
    def to_latex(self) -> str:
        pass

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.token.value == other.token.value
            and self.children == other.children
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.token.value, self.children))


class LiteralNode(Node):
    def __init__(self, token: Token):
        super().__init__(token)
        self.value = token.value in TRUE_LITERALS

    def __repr__(self) -> str:
        return self.token.value

    def eval(self, assignment: "VariableAssignment") -> bool:
        return self.value

    def to_latex(self) -> str:
        return r"\top" if self.value else r"\bot"


class VarNode(Node):
    def __init__(self, variable: Variable, token: Token | None = None):
        super().__init__(token or Token(TokenType.VARIABLE, variable.name))
        self.variable = variable

    def __repr__(self) -> str:
        return self.variable.name

    def eval(self, assignment: "VariableAssignment") -> bool:
        return assignment[self.variable]

    def to_latex(self) -> str:
        return self.variable.name


class NotNode(Node):
    def __init__(self, operand: Node, token: Token = Token(TokenType.NOT, "not")):
        super().__init__(token)
        self.operand = operand
        self._depth = operand.depth + 1

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.operand,)

    @property
    def depth(self) -> int:
        return self._depth

    def __repr__(self) -> str:
        separator = " " if self.token.value[-1].isalnum() else ""
        return f"{self.token.value}{separator}{self.operand!r}"

    def eval(self, assignment: "VariableAssignment") -> bool:
        return not self.operand.eval(assignment)

    def to_latex(self) -> str:
        return rf"\lnot {self.operand.to_latex()}"


class BinaryNode(Node):
    """An infix operator. Both operands are always evaluated, left first."""

    token_type: ClassVar[TokenType]
    default_lexeme: ClassVar[str]
    latex_symbol: ClassVar[str]

    def __init__(self, left: Node, right: Node, token: Token | None = None):
        super().__init__(token or Token(self.token_type, self.default_lexeme))
        self.left = left
        self.right = right
        self._depth = max(left.depth, right.depth) + 1

    @property
    def children(self) -> tuple[Node, ...]:
        return (self.left, self.right)

    @property
    def depth(self) -> int:
        return self._depth

    def __repr__(self) -> str:
        return f"({self.left!r} {self.token.value} {self.right!r})"

    def eval(self, assignment: "VariableAssignment") -> bool:
        left = self.left.eval(assignment)
        right = self.right.eval(assignment)
        return self.combine(left, right)

    @staticmethod
    @abstractmethod
    def combine(left: bool, right: bool) -> bool:
        pass

    def to_latex(self) -> str:
        return f"({self.left.to_latex()} {self.latex_symbol} {self.right.to_latex()})"


class AndNode(BinaryNode):
    token_type = TokenType.AND
    default_lexeme = "and"
    latex_symbol = r"\land"

    @staticmethod
    def combine(left: bool, right: bool) -> bool:
        return left and right


class OrNode(BinaryNode):
    token_type = TokenType.OR
    default_lexeme = "or"
    latex_symbol = r"\lor"

    @staticmethod
    def combine(left: bool, right: bool) -> bool:
        return left or right


class XorNode(BinaryNode):
    token_type = TokenType.XOR
    default_lexeme = "xor"
    latex_symbol = r"\oplus"

    @staticmethod
    def combine(left: bool, right: bool) -> bool:
        return left != right


class NandNode(BinaryNode):
    token_type = TokenType.NAND
    default_lexeme = "nand"
    latex_symbol = r"\uparrow"

    @staticmethod
    def combine(left: bool, right: bool) -> bool:
        return not (left and right)


class ImplicationNode(BinaryNode):
    token_type = TokenType.IMPLIES
    default_lexeme = "implies"
    latex_symbol = r"\implies"

    @staticmethod
    def combine(left: bool, right: bool) -> bool:
        return (not left) or right


class IffNode(BinaryNode):
    token_type = TokenType.IFF
    default_lexeme = "iff"
    latex_symbol = r"\iff"

    @staticmethod
    def combine(left: bool, right: bool) -> bool:
        return left == right


BINARY_NODES: dict[TokenType, type[BinaryNode]] = {
    node_type.token_type: node_type
    for node_type in (AndNode, OrNode, XorNode, NandNode, ImplicationNode, IffNode)
}
