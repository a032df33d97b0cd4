"""Compile the configured expressions and print or save their truth tables."""

import logging
import os

from omegaconf import DictConfig, OmegaConf

from propcalc.config import DisplayOptions
from propcalc.hydra_utils.utils import resolve_options
from propcalc.logic.errors import CompileError, EvaluationError
from propcalc.logic.parser import parse
from propcalc.table.render import render_latex, render_text
from propcalc.table.truth_table import TruthTable

logger = logging.getLogger(__name__)

_EXTENSIONS = {"text": "txt", "latex": "tex", "csv": "csv"}


def render(table: TruthTable, output_format: str, display: DisplayOptions) -> str:
    match output_format:
        case "text":
            return render_text(table, display)
        case "latex":
            return render_latex(table, display)
        case "csv":
            df = table.to_dataframe()
            return df.to_csv(index=False)
        case _:
            raise ValueError(f"Unknown output format {output_format!r}")


def run(cfg: DictConfig) -> list[TruthTable]:
    """Build the truth table of every expression in ``cfg.expressions``.

    Expressions that fail to compile are logged and skipped. If ``cfg.assignment``
    is set, each statement is also evaluated under that (default-true) assignment.

    Returns:
        The truth tables of all expressions that compiled.
    """
    syntax, display = resolve_options(cfg)
    output_format = cfg.output.format
    if output_format not in _EXTENSIONS:
        raise ValueError(f"Unknown output format {output_format!r}")
    if cfg.output.dir is not None:
        os.makedirs(cfg.output.dir, exist_ok=True)

    tables = []
    for i, expression in enumerate(cfg.expressions):
        try:
            statement = parse(expression, syntax)
        except CompileError as e:
            logger.error(f"Could not compile {expression!r}: {e}")
            continue
        variables = ", ".join(v.name for v in statement.variables)
        logger.info(f"Compiled {expression!r} with variables [{variables}]")

        if cfg.assignment:
            overrides = OmegaConf.to_container(cfg.assignment)
            try:
                value = statement.evaluate(overrides)
            except EvaluationError as e:
                logger.warning(f"Could not evaluate {expression!r}: {e}")
            else:
                logger.info(f"{expression} under {overrides}: {display.format(value)}")

        table = statement.truth_table(backend=cfg.table.backend)
        tables.append(table)
        text = render(table, output_format, display)
        if cfg.output.dir is None:
            print(text)
        else:
            path = os.path.join(cfg.output.dir, f"table_{i}.{_EXTENSIONS[output_format]}")
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
            logger.info(f"Saved truth table of {expression!r} to {path}")
    return tables
