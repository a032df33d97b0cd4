"""Truth table entry point.

Uses Hydra for configuration management. See conf/truth_table.yaml, or run
`python truth_table.py --help` for details.
"""

import hydra
from omegaconf import DictConfig

from propcalc.app import run


@hydra.main(version_base="1.1", config_path="../conf", config_name="truth_table")
def main(cfg: DictConfig):
    run(cfg)


if __name__ == "__main__":
    main()
