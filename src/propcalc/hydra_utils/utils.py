import hydra
from omegaconf import DictConfig, OmegaConf

from propcalc.config import DEFAULT_DISPLAY, DEFAULT_SYNTAX, DisplayOptions, SyntaxOptions

GLYPHS = {
    "check": "✓",
    "cross": "✗",
    "top": "⊤",
    "bottom": "⊥",
    "one": "1",
    "zero": "0",
}


def register_custom_resolvers():
    OmegaConf.register_new_resolver("glyph", lambda name: GLYPHS[name])


def resolve_options(cfg: DictConfig) -> tuple[SyntaxOptions, DisplayOptions]:
    """Instantiate the syntax and display options from the config.
    Args:
        cfg: DictConfig with optional `syntax` and `display` nodes, each with a
            `_target_` pointing at the options dataclass.
    Returns:
        The syntax and display options, defaults for missing nodes.
    """
    syntax = DEFAULT_SYNTAX
    if cfg.get("syntax") is not None:
        syntax = hydra.utils.instantiate(cfg.syntax)
    display = DEFAULT_DISPLAY
    if cfg.get("display") is not None:
        display = hydra.utils.instantiate(cfg.display)
    return syntax, display
