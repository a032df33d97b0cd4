from propcalc.table.truth_table import TruthTable, TruthTableRow, assignment_matrix

__all__ = ["TruthTable", "TruthTableRow", "assignment_matrix"]
