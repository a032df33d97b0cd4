"""Text and LaTeX renderings of truth tables."""

from propcalc.config import DEFAULT_DISPLAY, DisplayOptions
from propcalc.table.truth_table import TruthTable, TruthTableRow


def _visible_rows(
    table: TruthTable, display: DisplayOptions
) -> list[TruthTableRow]:
    if display.only_show_true:
        return [row for row in table if row.results[-1]]
    return list(table)


def _headers(table: TruthTable, display: DisplayOptions) -> list[str]:
    statement = table.statement
    headers = [variable.name for variable in statement.variables]
    if display.show_sub_expressions:
        headers += [repr(node) for node in statement.sub_expressions]
    headers.append(statement.text)
    return headers


def _cells(row: TruthTableRow, display: DisplayOptions) -> list[bool]:
    cells = list(row.assignment.values())
    if display.show_sub_expressions:
        cells += row.results[:-1]
    cells.append(row.results[-1])
    return cells


def render_text(table: TruthTable, display: DisplayOptions = DEFAULT_DISPLAY) -> str:
    """Render a table with one column per variable, optional sub-expression columns
    and a final column for the statement, e.g.::

        | p     | q     | p and q |
        | true  | true  | true    |
    """
    headers = _headers(table, display)
    value_width = max(len(display.true_text), len(display.false_text))
    widths = [max(len(header), value_width) for header in headers]

    def line(texts: list[str]) -> str:
        padded = (text.ljust(width) for text, width in zip(texts, widths))
        return "| " + " | ".join(padded) + " |"

    lines = [line(headers)]
    for row in _visible_rows(table, display):
        lines.append(line([display.format(v) for v in _cells(row, display)]))
    return "\n".join(lines) + "\n"


def render_latex(table: TruthTable, display: DisplayOptions = DEFAULT_DISPLAY) -> str:
    """Render a table as a LaTeX ``array`` in display math."""
    statement = table.statement
    num_variables = len(statement.variables)
    headers = [variable.name for variable in statement.variables]
    if display.show_sub_expressions:
        headers += [node.to_latex() for node in statement.sub_expressions]
    headers.append(statement.root.to_latex())

    # variables are separated from the expressions by a double rule
    variable_columns = "|".join("c" * num_variables)
    expression_columns = "|".join("c" * (len(headers) - num_variables))
    columns = (
        f"{variable_columns}||{expression_columns}"
        if variable_columns
        else expression_columns
    )

    lines = [r"\[", rf"\begin{{array}}{{{columns}}}"]
    lines.append(" & ".join(headers) + r" \\ \hline")
    for row in _visible_rows(table, display):
        lines.append(
            " & ".join(display.format(v) for v in _cells(row, display)) + r" \\"
        )
    lines += [r"\end{array}", r"\]"]
    return "\n".join(lines) + "\n"
