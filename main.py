# Cayley: Hypercomplex and Clifford Algebra Construction
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Cayley CLI Entry Point. Prints a multiplication table.

Examples:
    python main.py                                   # quaternions over int
    python main.py doubling.signs=[negative,positive]
    python main.py kind=named named=octonion
    python main.py kind=clifford clifford.total=3 clifford.negative=3
"""

from typing import List

import hydra
from omegaconf import DictConfig

from log import get_logger
from cayley.catalog import ALGEBRAS, clifford
from cayley.doubling import cayley_dickson
from cayley.ring import resolve_ring
from cayley.table import clifford_table, doubling_table, render_table

logger = get_logger(__name__)


def build_table(cfg: DictConfig) -> List[str]:
    """Builds the table lines for the algebra described by ``cfg``.

    Args:
        cfg (DictConfig): The plan.

    Returns:
        List[str]: Rendered table rows.
    """
    kind = cfg.kind
    ring = resolve_ring(cfg.get('ring', 'int'))

    if kind == 'doubling':
        signs = list(cfg.doubling.signs)
        algebra = cayley_dickson(ring, len(signs), signs)
        logger.info("Cayley-Dickson algebra over %s, signs %s", ring.__name__, signs)
        rows = doubling_table(algebra)
    elif kind == 'named':
        name = cfg.named
        if name not in ALGEBRAS:
            raise ValueError(f"Unknown algebra: {name}. Available: {list(ALGEBRAS.keys())}")
        logger.info("%s over %s", name, ring.__name__)
        rows = doubling_table(ALGEBRAS[name](ring))
    elif kind == 'clifford':
        algebra = clifford(cfg.clifford.total, cfg.clifford.negative, cfg.clifford.positive)
        logger.info("Clifford algebra %s", algebra.signature)
        rows = clifford_table(algebra)
    else:
        raise ValueError(f"Unknown kind: {kind}. Available: ['doubling', 'named', 'clifford']")

    return render_table(rows)


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    """Logs the multiplication table, one row per line."""
    for line in build_table(cfg):
        logger.info(line)


if __name__ == "__main__":
    main()
