from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from propcalc.logic.errors import UndefinedVariable

if TYPE_CHECKING:
    from propcalc.logic.statement import Statement


@dataclass(frozen=True, order=True)
class Variable:
    """An atomic proposition. Two variables are the same iff their names are."""

    name: str

    def __str__(self) -> str:
        return self.name


class VariableAssignment(Mapping[Variable, bool]):
    """A mapping from the variables of one statement to truth values.

    Assignments are immutable; :meth:`with_value` returns an updated copy. Entries
    are kept in the canonical (sorted) variable order of the statement, and equality
    and hashing are defined over that ordered entry sequence. Keys may be given
    either as :class:`Variable` or by name.
    """

    def __init__(
        self,
        variables: Sequence[Variable],
        values: Mapping[Variable, bool],
        statement: str | None = None,
    ):
        self.statement = statement
        self._by_name = {variable.name: variable for variable in variables}
        for variable in values:
            if self._by_name.get(variable.name) != variable:
                raise UndefinedVariable(variable.name, statement)
        self._values = {
            variable: bool(values[variable])
            for variable in variables
            if variable in values
        }

    @classmethod
    def default(cls, statement: "Statement") -> "VariableAssignment":
        """Every variable of the statement set to true."""
        return cls(
            statement.variables,
            {variable: True for variable in statement.variables},
            statement.text,
        )

    @classmethod
    def from_overrides(
        cls, statement: "Statement", overrides: Mapping[str, bool]
    ) -> "VariableAssignment":
        """The default assignment with the given names overridden."""
        return cls.default(statement).update(overrides)

    @classmethod
    def partial(
        cls, statement: "Statement", values: Mapping[str, bool]
    ) -> "VariableAssignment":
        """An assignment holding only the given names; all others stay unassigned."""
        empty = cls(statement.variables, {}, statement.text)
        return empty.update(values)

    def copy(self) -> "VariableAssignment":
        return VariableAssignment(self.variables, self._values, self.statement)

    @property
    def variables(self) -> tuple[Variable, ...]:
        """All variables of the statement, assigned or not."""
        return tuple(self._by_name.values())

    def resolve(self, key: Variable | str) -> Variable:
        """Return the statement variable for a name or variable."""
        name = key.name if isinstance(key, Variable) else key
        variable = self._by_name.get(name)
        if variable is None:
            raise UndefinedVariable(name, self.statement)
        return variable

    def with_value(self, key: Variable | str, value: bool) -> "VariableAssignment":
        variable = self.resolve(key)
        values = dict(self._values)
        values[variable] = value
        return VariableAssignment(self.variables, values, self.statement)

    def update(self, values: Mapping[str, bool]) -> "VariableAssignment":
        merged = dict(self._values)
        for name, value in values.items():
            merged[self.resolve(name)] = value
        return VariableAssignment(self.variables, merged, self.statement)

    def __getitem__(self, key: Variable | str) -> bool:
        variable = self.resolve(key)
        if variable not in self._values:
            raise UndefinedVariable(variable.name, self.statement)
        return self._values[variable]

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Variable):
            return key in self._values
        if isinstance(key, str):
            return Variable(key) in self._values
        return False

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariableAssignment):
            return NotImplemented
        return list(self._values.items()) == list(other._values.items())

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __repr__(self) -> str:
        return " | ".join(f"{v.name} = {value}" for v, value in self._values.items())
