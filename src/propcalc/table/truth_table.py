import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Literal, NamedTuple

import jax.numpy as jnp
import numpy as np
import pandas as pd

from propcalc.logic.assignment import VariableAssignment
from propcalc.table.jax_table import JaxStatement

if TYPE_CHECKING:
    from propcalc.logic.statement import Statement

logger = logging.getLogger(__name__)

Backend = Literal["python", "jax"]

# 2**62 rows is already far beyond anything that fits in memory
MAX_VARIABLES = 62


def assignment_matrix(num_variables: int) -> np.ndarray:
    """Truth values of every variable in every row, in canonical row order.

    Variable ``j`` is true in row ``i`` iff bit ``num_variables - 1 - j`` of ``i`` is
    zero, so the first variable toggles slowest and the last one every row.

    Returns:
        Boolean array of shape (2**num_variables, num_variables).
    """
    if not 0 <= num_variables <= MAX_VARIABLES:
        raise ValueError(
            f"Cannot enumerate assignments of {num_variables} variables "
            f"(at most {MAX_VARIABLES})."
        )
    rows = np.arange(2**num_variables, dtype=np.int64)
    shifts = np.arange(num_variables - 1, -1, -1, dtype=np.int64)
    return ((rows[:, None] >> shifts[None, :]) & 1) == 0


class TruthTableRow(NamedTuple):
    assignment: VariableAssignment
    # one value per marked sub-expression, followed by the value of the statement
    results: tuple[bool, ...]


class TruthTable:
    """The results of a statement under all 2^n assignments of its variables.

    Rows are stored in canonical order (see :func:`assignment_matrix`). Each row holds
    the value of every marked sub-expression, in parse order, followed by the value
    of the whole statement.
    """

    def __init__(self, statement: "Statement", backend: Backend = "python"):
        self.statement = statement
        columns = assignment_matrix(len(statement.variables))
        assignments = [self._assignment(row) for row in columns]
        logger.debug(
            f"Building truth table of {statement.text!r} with {len(columns)} rows "
            f"using the {backend} backend"
        )
        match backend:
            case "python":
                values = self._evaluate_rows(assignments)
            case "jax":
                jax_statement = JaxStatement.from_statement(statement)
                values = np.asarray(jax_statement(jnp.asarray(columns)))
            case _:
                raise ValueError(f"Unknown truth table backend {backend!r}")
        self.values: np.ndarray = values  # shape: (num_rows, num_sub_expressions + 1)
        self.rows: tuple[TruthTableRow, ...] = tuple(
            TruthTableRow(assignment, tuple(bool(v) for v in results))
            for assignment, results in zip(assignments, values)
        )

    def _assignment(self, row: np.ndarray) -> VariableAssignment:
        variables = self.statement.variables
        return VariableAssignment(
            variables,
            {variable: bool(value) for variable, value in zip(variables, row)},
            self.statement.text,
        )

    def _evaluate_rows(self, assignments: list[VariableAssignment]) -> np.ndarray:
        nodes = (*self.statement.sub_expressions, self.statement.root)
        values = np.zeros((len(assignments), len(nodes)), dtype=bool)
        for i, assignment in enumerate(assignments):
            for j, node in enumerate(nodes):
                values[i, j] = node.eval(assignment)
        return values

    @property
    def mapping(self) -> dict[VariableAssignment, tuple[bool, ...]]:
        """Ordered mapping from each assignment to its results."""
        return {row.assignment: row.results for row in self.rows}

    @property
    def results(self) -> np.ndarray:
        """Value of the whole statement in every row."""
        return self.values[:, -1]

    def columns(self) -> list[str]:
        return [
            *(variable.name for variable in self.statement.variables),
            *(repr(node) for node in self.statement.sub_expressions),
            self.statement.text,
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """One boolean column per variable, per marked sub-expression and for the statement."""
        data = np.concatenate(
            [assignment_matrix(len(self.statement.variables)), self.values], axis=1
        )
        return pd.DataFrame(data, columns=self.columns())

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[TruthTableRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> TruthTableRow:
        return self.rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TruthTable):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self) -> int:
        return hash(self.rows)

    def __repr__(self) -> str:
        return f"TruthTable({self.statement.text!r}, rows={len(self.rows)})"
