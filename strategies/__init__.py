"""Auto-discovery of built-in strategies.

Every module in this package may export a ``STRATEGIES`` dict mapping a
short name to a factory ``factory(dictionary) -> Strategy``.  The registry
is the union of those dicts.
"""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Callable, Mapping

from strategy import Strategy

_PKG_DIR = Path(__file__).resolve().parent

StrategyFactory = Callable[[Mapping[str, int]], Strategy]


def _discover_builtin() -> dict[str, StrategyFactory]:
    """Import all .py files in this package and collect their factories."""
    found: dict[str, StrategyFactory] = {}
    for info in sorted(pkgutil.iter_modules([str(_PKG_DIR)]), key=lambda i: i.name):
        mod = importlib.import_module(f"strategies.{info.name}")
        for name, factory in getattr(mod, "STRATEGIES", {}).items():
            key = name.lower()
            if key in found:
                raise RuntimeError(
                    f"strategy {name!r} registered twice (again in {mod.__name__})"
                )
            found[key] = factory
    return found


def available_strategies() -> dict[str, StrategyFactory]:
    """Return the name -> factory registry of all built-in strategies."""
    return _discover_builtin()


def get_strategy(name: str) -> StrategyFactory:
    """Look a strategy factory up by name (case-insensitive)."""
    registry = available_strategies()
    try:
        return registry[name.lower()]
    except KeyError:
        raise KeyError(
            f"strategy {name!r} not found. Available: {sorted(registry)}"
        ) from None
