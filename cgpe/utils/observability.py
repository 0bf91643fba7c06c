"""Diagnostic reports and rendering for expressions.

Nothing here is needed to decode, evaluate or mutate; these helpers render
engine state for logs and compare runs for determinism.
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any, Iterable

SCHEMA_VERSION = 1
MAX_OUTPUT_LENGTH = 5


def format_sequence(seq: Iterable[Any], max_items: int = MAX_OUTPUT_LENGTH) -> str:
    """Render ``seq`` as ``[a, b]``; long sequences are cut to ``[a, ..., e, ... ]``."""
    items = list(seq)
    if len(items) <= max_items:
        return "[" + ", ".join(str(x) for x in items) + "]"
    return "[" + "".join(f"{x}, " for x in items[:max_items]) + "... ]"


def format_expression(expr: Any) -> str:
    lines = [
        "CGP Expression:",
        f"\tNumber of inputs:\t\t{expr.n}",
        f"\tNumber of outputs:\t\t{expr.m}",
        f"\tNumber of rows:\t\t\t{expr.rows}",
        f"\tNumber of columns:\t\t{expr.cols}",
        f"\tNumber of levels-back allowed:\t{expr.levels_back}",
        f"\tBasis function arity:\t\t{expr.arity}",
        "",
        f"\tResulting lower bounds:\t{format_sequence(expr.lb)}",
        f"\tResulting upper bounds:\t{format_sequence(expr.ub)}",
        "",
        f"\tCurrent expression (encoded):\t{format_sequence(expr.get())}",
        f"\tActive nodes:\t\t\t{format_sequence(expr.active_nodes)}",
        f"\tActive genes:\t\t\t{format_sequence(expr.active_genes)}",
        "",
        f"\tFunction set:\t\t\t{format_sequence(expr.kernels.names())}",
    ]
    return "\n".join(lines) + "\n"


def expression_report(expr: Any) -> dict[str, Any]:
    """JSON-serialisable snapshot of an expression's full state."""
    return {
        'schema_version': SCHEMA_VERSION,
        'layout': expr.layout.to_dict(),
        'kernels': list(expr.kernels.names()),
        'seed': expr.seed,
        'lb': list(expr.lb),
        'ub': list(expr.ub),
        'genotype': list(expr.get()),
        'active_nodes': list(expr.active_nodes),
        'active_genes': list(expr.active_genes),
    }


def determinism_signature(report: dict[str, Any]) -> str:
    """sha256 of the canonical JSON encoding of ``report``."""
    payload = json.dumps(report, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def log_expression(expr: Any, level: int = logging.DEBUG) -> None:
    logging.log(level, "%s", format_expression(expr))


__all__ = [
    'SCHEMA_VERSION',
    'format_sequence',
    'format_expression',
    'expression_report',
    'determinism_signature',
    'log_expression',
]
