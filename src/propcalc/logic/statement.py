from collections.abc import Mapping

from propcalc.logic.assignment import Variable, VariableAssignment
from propcalc.logic.nodes import Node
from propcalc.table.truth_table import Backend, TruthTable


class Statement:
    """A compiled, immutable logical expression.

    Holds the source text, the root of the syntax tree, the canonical (sorted,
    deduplicated) variables and the marked sub-expressions in the order their
    closing parentheses were reached. Create statements with :func:`propcalc.parse`.
    """

    def __init__(
        self,
        text: str,
        root: Node,
        variables: tuple[Variable, ...],
        sub_expressions: tuple[Node, ...] = (),
    ):
        self._text = text
        self._root = root
        self._variables = variables
        self._sub_expressions = sub_expressions

    @property
    def text(self) -> str:
        return self._text

    @property
    def root(self) -> Node:
        return self._root

    @property
    def variables(self) -> tuple[Variable, ...]:
        return self._variables

    @property
    def sub_expressions(self) -> tuple[Node, ...]:
        return self._sub_expressions

    def evaluate(
        self, assignment: VariableAssignment | Mapping[str, bool] | None = None
    ) -> bool:
        """Evaluate the statement.

        Args:
            assignment: A :class:`VariableAssignment`, or a mapping from variable
                names to values that overrides the all-true default. ``None``
                evaluates with every variable true.

        Raises:
            UndefinedVariable: if a mapping names a variable the statement does not
                declare, or the assignment leaves a referenced variable unassigned.
        """
        if assignment is None:
            assignment = VariableAssignment.default(self)
        elif not isinstance(assignment, VariableAssignment):
            assignment = VariableAssignment.from_overrides(self, assignment)
        return self._root.eval(assignment)

    def truth_table(self, backend: Backend = "python") -> TruthTable:
        return TruthTable(self, backend=backend)

    def with_variables(self, *names: str) -> "Statement":
        """Return a copy whose variable list also contains ``names``.

        Useful to line up the truth tables of statements over different variables.
        """
        variables = set(self._variables) | {Variable(name) for name in names}
        return Statement(
            self._text, self._root, tuple(sorted(variables)), self._sub_expressions
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Statement):
            return NotImplemented
        return (
            self._root == other._root
            and self._variables == other._variables
            and self._sub_expressions == other._sub_expressions
        )

    def __hash__(self) -> int:
        return hash((self._root, self._variables, self._sub_expressions))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Statement({self._text!r})"
