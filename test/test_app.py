import logging

import pandas as pd
from hydra import compose, initialize

from propcalc.app import run
from propcalc.config import DisplayOptions, SyntaxOptions
from propcalc.hydra_utils.utils import resolve_options


def load_config(overrides: list[str] | None = None):
    with initialize(version_base="1.1", config_path="../conf"):
        return compose(config_name="truth_table", overrides=overrides or [])


def test_resolve_options():
    cfg = load_config(["display.true_text=${glyph:top}", "syntax.highlight_char='#'"])
    syntax, display = resolve_options(cfg)
    assert syntax == SyntaxOptions(
        highlight_char="#", max_depth=50, max_tree_depth=250
    )
    assert isinstance(display, DisplayOptions)
    assert display.true_text == "⊤"
    assert display.false_text == "false"


def test_run_prints_tables(capsys):
    cfg = load_config()
    tables = run(cfg)
    assert len(tables) == len(cfg.expressions)
    out = capsys.readouterr().out
    assert "| p     | q     | p and q |" in out
    # sub-expressions are shown by the default config
    assert "(p or q)" in out


def test_run_skips_invalid_expressions(caplog):
    cfg = load_config()
    cfg.expressions = ["p and", "p or q"]
    cfg.table.backend = "jax"
    with caplog.at_level(logging.ERROR):
        tables = run(cfg)
    assert len(tables) == 1
    assert tables[0].statement.text == "p or q"
    assert "Could not compile 'p and'" in caplog.text


def test_run_writes_csv(tmp_path):
    cfg = load_config(["output.format=csv"])
    cfg.output.dir = str(tmp_path)
    cfg.expressions = ["a xor b"]
    run(cfg)
    df = pd.read_csv(tmp_path / "table_0.csv")
    assert list(df.columns) == ["a", "b", "a xor b"]
    assert df["a xor b"].tolist() == [False, True, True, False]


def test_run_evaluates_assignment(caplog):
    cfg = load_config()
    cfg.expressions = ["p implies q"]
    cfg.assignment = {"q": False}
    with caplog.at_level(logging.INFO):
        run(cfg)
    assert "p implies q under {'q': False}: false" in caplog.text

    cfg.assignment = {"x": False}
    with caplog.at_level(logging.WARNING):
        run(cfg)
    assert "Could not evaluate 'p implies q'" in caplog.text
