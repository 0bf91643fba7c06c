"""Configuration defaults and presets for building expressions.

Configs are plain dicts. ``resolve_config`` overlays a user dict on
``DEFAULT_CONFIG``; the structural keys map onto the ``Expression``
constructor arguments.
"""

from __future__ import annotations

from typing import Any


DEFAULT_CONFIG: dict[str, Any] = {
    'rows': 1,
    'cols': 15,
    'levels_back': 16,
    'arity': 2,
    'kernels': ['sum', 'diff', 'mul', 'div'],
    'seed': 0,
}

# Tiny grid for quick experiments and tests
PRESET_MINIMAL: dict[str, Any] = {
    'rows': 1,
    'cols': 5,
    'levels_back': 6,
    'arity': 2,
    'kernels': ['sum', 'mul'],
}

PRESET_STANDARD: dict[str, Any] = {
    'rows': 1,
    'cols': 15,
    'levels_back': 16,
    'arity': 2,
    'kernels': ['sum', 'diff', 'mul', 'pdiv'],
}

PRESET_RESEARCH: dict[str, Any] = {
    'rows': 4,
    'cols': 30,
    'levels_back': 31,
    'arity': 2,
    'kernels': ['sum', 'diff', 'mul', 'pdiv', 'sin', 'cos', 'exp', 'log'],
}


def resolve_config(config: dict | None = None) -> dict[str, Any]:
    """Return ``DEFAULT_CONFIG`` updated with ``config``; unknown keys are rejected."""
    resolved = dict(DEFAULT_CONFIG)
    if not config:
        return resolved
    unknown = sorted(k for k in config if k not in DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {unknown}")
    resolved.update(config)
    return resolved


__all__ = [
    'DEFAULT_CONFIG',
    'PRESET_MINIMAL',
    'PRESET_STANDARD',
    'PRESET_RESEARCH',
    'resolve_config',
]
