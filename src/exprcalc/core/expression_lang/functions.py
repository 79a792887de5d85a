"""
Built-in functions and constants for the exprcalc expression language.

Both tables are read-only mappings built once at import. Function bodies are
numpy float64 kernels so that out-of-domain input produces inf/NaN instead of
raising; callers are expected to run them under ``np.errstate(all="ignore")``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import reduce
from types import MappingProxyType

import numpy as np


@dataclass(frozen=True)
class FunctionSpec:
    """A built-in function: its name, accepted arity, and kernel.

    ``max_args`` of ``None`` means the function is variadic.
    """

    name: str
    impl: Callable[..., float]
    min_args: int
    max_args: int | None
    summary: str = ""

    def accepts(self, count: int) -> bool:
        if count < self.min_args:
            return False
        return self.max_args is None or count <= self.max_args

    @property
    def arity(self) -> str:
        """Human-readable arity, e.g. ``1``, ``1 or 2``, ``at least 1``."""
        if self.max_args is None:
            return f"at least {self.min_args}"
        if self.max_args == self.min_args:
            return str(self.min_args)
        if self.max_args == self.min_args + 1:
            return f"{self.min_args} or {self.max_args}"
        return f"{self.min_args} to {self.max_args}"


def _round_half_away(x: float) -> float:
    """Round to nearest integer, ties away from zero (2.5 → 3, -2.5 → -3)."""
    whole = np.trunc(x)
    if np.abs(x - whole) >= 0.5:
        whole += np.copysign(1.0, x)
    return whole


def _log(*args: float) -> float:
    # log(x) is base 10; log(b, x) is base b
    if len(args) == 1:
        return np.log10(args[0])
    base, x = args
    return np.log(x) / np.log(base)


def _clamp(value: float, lo: float, hi: float) -> float:
    return np.minimum(np.maximum(value, lo), hi)


def _fold(op: Callable[[float, float], float]) -> Callable[..., float]:
    def folded(*args: float) -> float:
        return reduce(op, args)

    return folded


def _unary(name: str, impl: Callable[[float], float], summary: str) -> FunctionSpec:
    return FunctionSpec(name=name, impl=impl, min_args=1, max_args=1, summary=summary)


_FUNCTION_LIST: list[FunctionSpec] = [
    # Rounding and sign
    _unary("abs", np.abs, "absolute value"),
    _unary("ceil", np.ceil, "smallest integer >= x"),
    _unary("floor", np.floor, "largest integer <= x"),
    _unary("round", _round_half_away, "nearest integer, ties away from zero"),
    _unary("sign", np.sign, "-1, 0 or 1 by the sign of x"),
    # Trigonometry (radians)
    _unary("sin", np.sin, "sine"),
    _unary("cos", np.cos, "cosine"),
    _unary("tan", np.tan, "tangent"),
    _unary("asin", np.arcsin, "inverse sine, NaN outside [-1, 1]"),
    _unary("acos", np.arccos, "inverse cosine, NaN outside [-1, 1]"),
    _unary("atan", np.arctan, "inverse tangent"),
    # Logarithms and roots
    _unary("ln", np.log, "natural logarithm"),
    FunctionSpec("log", _log, 1, 2, "log(x) base 10, log(b, x) base b"),
    _unary("sqrt", np.sqrt, "square root, NaN for negative x"),
    # Folds
    FunctionSpec("max", _fold(np.fmax), 1, None, "largest argument"),
    FunctionSpec("min", _fold(np.fmin), 1, None, "smallest argument"),
    # Clamping
    FunctionSpec("clamp", _clamp, 3, 3, "clamp(x, lo, hi) bounds x to [lo, hi]"),
    _unary("clamp01", lambda x: _clamp(x, 0.0, 1.0), "bounds x to [0, 1]"),
]

FUNCTIONS: Mapping[str, FunctionSpec] = MappingProxyType({f.name: f for f in _FUNCTION_LIST})

CONSTANTS: Mapping[str, float] = MappingProxyType(
    {
        "pi": float(np.pi),
        "e": float(np.e),
    }
)


def list_functions() -> list[FunctionSpec]:
    """List built-in functions in table order (rounding, trigonometry, logs, folds, clamps)."""
    return list(FUNCTIONS.values())


def list_constants() -> dict[str, float]:
    """List available built-in constants."""
    return dict(CONSTANTS)
