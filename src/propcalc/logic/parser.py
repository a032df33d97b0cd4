import functools
import logging

from propcalc.config import DEFAULT_SYNTAX, SyntaxOptions
from propcalc.logic.assignment import Variable
from propcalc.logic.errors import (
    ExpressionTooDeep,
    MisplacedToken,
    TokenMismatch,
    UnexpectedEndOfInput,
)
from propcalc.logic.lexer import Lexer
from propcalc.logic.nodes import BINARY_NODES, LiteralNode, Node, NotNode, VarNode
from propcalc.logic.statement import Statement
from propcalc.logic.tokens import Precedence, Token, TokenCategory, TokenType

logger = logging.getLogger(__name__)


class Parser:
    """Precedence-climbing recursive descent parser.

    ``expression(p)`` parses an operand of the next tighter precedence and then folds
    all infix operators of precedence ``p`` left to right. The tightest level parses
    factors: literals, variables, negations and parenthesized groups.
    """

    def __init__(self, expression: str, options: SyntaxOptions = DEFAULT_SYNTAX):
        self.expression = expression
        self.options = options
        self.tokens: list[Token] = Lexer(expression, options.highlight_char).lex()
        self.pos = 0
        self.current_token: Token | None = (
            self.tokens[self.pos] if self.tokens else None
        )
        self.nesting = 0
        self.variables: dict[str, Variable] = {}
        self.sub_expressions: list[Node] = []

    def parse(self) -> Statement:
        root = self.parse_expression(Precedence.LOWEST)
        if self.current_token is not None:
            raise MisplacedToken(self.current_token, self.pos)
        statement = Statement(
            self.expression,
            root,
            tuple(sorted(self.variables.values())),
            tuple(self.sub_expressions),
        )
        logger.debug(f"Parsed {self.expression!r} into a tree of depth {root.depth}")
        return statement

    def parse_expression(self, precedence: Precedence) -> Node:
        node = self.parse_operand(precedence)
        while (
            self.current_token is not None
            and self.current_token.type.is_infix
            and self.current_token.type.precedence == precedence
        ):
            token = self.current_token
            self.next_token()
            right = self.parse_operand(precedence)
            node = BINARY_NODES[token.type](node, right, token)
            if node.depth > self.options.max_tree_depth:
                raise ExpressionTooDeep(self.options.max_tree_depth, self.pos)
        return node

    def parse_operand(self, precedence: Precedence) -> Node:
        if precedence == Precedence.HIGHEST:
            return self.parse_factor()
        return self.parse_expression(precedence.next())

    def parse_factor(self) -> Node:
        token = self.current_token
        if token is None:
            raise UnexpectedEndOfInput(self.pos)

        match token.type.category:
            case TokenCategory.LITERAL:
                self.next_token()
                return LiteralNode(token)
            case TokenCategory.VARIABLE:
                self.next_token()
                # every occurrence shares the variable of the first one
                variable = self.variables.setdefault(token.value, Variable(token.value))
                return VarNode(variable, token)
            case TokenCategory.OP_UNARY_PREFIX:
                self.next_token()
                self.enter()
                node = NotNode(self.parse_factor(), token)
                self.leave()
                return node
            case TokenCategory.GROUPING if token.type is TokenType.OPEN_PAREN:
                self.next_token()
                self.enter()
                node = self.parse_expression(Precedence.LOWEST)
                self.expect(TokenType.CLOSE_PAREN)
                self.leave()
                if self.is_marked(token):
                    self.sub_expressions.append(node)
                return node
            case _:
                raise MisplacedToken(token, self.pos)

    def is_marked(self, token: Token) -> bool:
        marker = self.options.highlight_char
        return marker is not None and token.value.startswith(marker)

    def expect(self, token_type: TokenType) -> None:
        if self.current_token is None:
            raise UnexpectedEndOfInput(self.pos)
        if self.current_token.type is not token_type:
            raise TokenMismatch(token_type, self.current_token, self.pos)
        self.next_token()

    def enter(self) -> None:
        self.nesting += 1
        if self.nesting > self.options.max_depth:
            raise ExpressionTooDeep(self.options.max_depth, self.pos)

    def leave(self) -> None:
        self.nesting -= 1

    def next_token(self) -> None:
        self.pos += 1
        if self.pos < len(self.tokens):
            self.current_token = self.tokens[self.pos]
        else:
            self.current_token = None


@functools.lru_cache(maxsize=4096)
def parse(text: str, options: SyntaxOptions = DEFAULT_SYNTAX) -> Statement:
    """Compile ``text`` into an immutable :class:`Statement`.

    Raises:
        CompileError: if the text cannot be tokenized or parsed.
    """
    return Parser(text, options).parse()
