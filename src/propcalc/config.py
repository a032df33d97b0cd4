from dataclasses import dataclass

# Characters the lexer always splits into words of their own, so a marker made of
# one of them could never stay attached to its parenthesis.
RESERVED_CHARS = frozenset("()!¬")


@dataclass(frozen=True)
class SyntaxOptions:
    """Options consumed by the lexer and parser.

    Args:
        highlight_char: Marker that, placed directly before ``(``, records the
            parenthesized group as a sub-expression. ``None`` disables marking.
        max_depth: Maximum nesting of parentheses and negations.
        max_tree_depth: Maximum depth of the syntax tree. Chains of infix operators
            count here, e.g. ``p or p or p`` has depth 3, so long flat expressions
            are allowed while the recursive evaluation stays bounded.
    """

    highlight_char: str | None = "*"
    max_depth: int = 50
    max_tree_depth: int = 250

    def __post_init__(self):
        if self.highlight_char is not None:
            if len(self.highlight_char) != 1:
                raise ValueError(
                    f"highlight_char must be a single character, got {self.highlight_char!r}"
                )
            if self.highlight_char.isspace() or self.highlight_char in RESERVED_CHARS:
                raise ValueError(
                    f"highlight_char cannot be whitespace or one of "
                    f"{''.join(sorted(RESERVED_CHARS))}, got {self.highlight_char!r}"
                )
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.max_tree_depth < 1:
            raise ValueError(
                f"max_tree_depth must be positive, got {self.max_tree_depth}"
            )


@dataclass(frozen=True)
class DisplayOptions:
    """Options consumed by the truth table renderers."""

    true_text: str = "true"
    false_text: str = "false"
    show_sub_expressions: bool = False
    only_show_true: bool = False

    def format(self, value: bool) -> str:
        return self.true_text if value else self.false_text


DEFAULT_SYNTAX = SyntaxOptions()
DEFAULT_DISPLAY = DisplayOptions()
