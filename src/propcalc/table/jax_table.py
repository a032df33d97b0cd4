from typing import TYPE_CHECKING

import equinox as eqx
import jax
import jax.numpy as jnp
from jaxtyping import Array, Bool

from propcalc.logic.assignment import Variable
from propcalc.logic.errors import UndefinedVariable
from propcalc.logic.nodes import (
    AndNode,
    BinaryNode,
    IffNode,
    ImplicationNode,
    LiteralNode,
    NandNode,
    Node,
    NotNode,
    OrNode,
    VarNode,
    XorNode,
)

if TYPE_CHECKING:
    from propcalc.logic.statement import Statement

_BINARY_OPS = {
    AndNode: jnp.logical_and,
    OrNode: jnp.logical_or,
    XorNode: jnp.logical_xor,
    NandNode: lambda a, b: jnp.logical_not(jnp.logical_and(a, b)),
    ImplicationNode: lambda a, b: jnp.logical_or(jnp.logical_not(a), b),
    IffNode: jnp.equal,
}


class JaxStatement(eqx.Module):
    """Jax representation of a statement that evaluates all rows of a truth table at once.

    The syntax tree is static, so it is traced once per statement and the resulting
    computation is a handful of vectorized boolean operations over the columns.
    """

    root: Node = eqx.field(static=True)
    sub_expressions: tuple[Node, ...] = eqx.field(static=True)
    variables: tuple[Variable, ...] = eqx.field(static=True)

    @classmethod
    def from_statement(cls, statement: "Statement") -> "JaxStatement":
        return cls(
            root=statement.root,
            sub_expressions=statement.sub_expressions,
            variables=statement.variables,
        )

    @eqx.filter_jit
    def __call__(
        self, columns: Bool[Array, "rows variables"]
    ) -> Bool[Array, "rows outputs"]:
        """Evaluate the marked sub-expressions and the root for every row.

        Args:
            columns: Truth value of each variable (in canonical order) in each row.

        Returns:
            Array with one column per marked sub-expression followed by the root.
        """
        index = {variable: i for i, variable in enumerate(self.variables)}
        outputs = [
            evaluate_columns(node, columns, index)
            for node in (*self.sub_expressions, self.root)
        ]
        return jnp.stack(outputs, axis=-1)


def evaluate_columns(
    node: Node, columns: jax.Array, index: dict[Variable, int]
) -> jax.Array:
    """Evaluate a node for a batch of assignments given as columns (shape: (rows, vars))."""
    match node:
        case LiteralNode():
            return jnp.full(columns.shape[:1], node.value, dtype=jnp.bool_)
        case VarNode():
            if node.variable not in index:
                raise UndefinedVariable(node.variable.name)
            return columns[:, index[node.variable]]
        case NotNode():
            return jnp.logical_not(evaluate_columns(node.operand, columns, index))
        case BinaryNode():
            left = evaluate_columns(node.left, columns, index)
            right = evaluate_columns(node.right, columns, index)
            return _BINARY_OPS[type(node)](left, right)
        case _:
            raise TypeError(f"Unsupported node {node!r}")
