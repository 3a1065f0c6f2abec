"""Configuration dataclasses for mutation generators."""

from __future__ import annotations

import math
from dataclasses import dataclass

GENERATOR_KINDS = ("constant", "uniform", "gaussian")


@dataclass
class MutationConfig:
    """Parameters for building a generator with :func:`generator_from_config`.

    Only the fields relevant to ``kind`` are used: ``value`` for constant
    deltas, ``low``/``high`` for uniform draws and ``mean``/``scale`` for
    gaussian draws. ``seed`` seeds a fresh RNG when none is supplied.
    """

    kind: str = "uniform"
    value: float = 0.0
    low: float = -0.1
    high: float = 0.1
    mean: float = 0.0
    scale: float = 0.1
    seed: int | None = None

    def __post_init__(self) -> None:
        self.kind = self.kind.strip().lower()
        if self.kind not in GENERATOR_KINDS:
            raise ValueError(f"kind must be one of: {', '.join(GENERATOR_KINDS)}")
        for name in ("value", "low", "high", "mean", "scale"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if self.low > self.high:
            raise ValueError("low must be <= high")
        if self.scale < 0.0:
            raise ValueError("scale must be >= 0")


__all__ = ["GENERATOR_KINDS", "MutationConfig"]
