"""Mutation generator factory helpers."""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from .config import MutationConfig
from .mutation import (
    ConstantGenerator,
    GaussianGenerator,
    MutationGenerator,
    SequenceGenerator,
    UniformGenerator,
)


def make_generator(
    kind: str = "uniform",
    config: Mapping[str, Any] | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> MutationGenerator:
    """Create a generator by kind (constant, uniform, gaussian, sequence)."""
    kind = kind.lower().strip()
    cfg = dict(config) if config is not None else {}
    if kind in {"constant", "const", "fixed"}:
        return ConstantGenerator(**cfg)
    if kind in {"sequence", "replay"}:
        return SequenceGenerator(**cfg)
    if kind in {"uniform", "random", "range"}:
        if rng is not None and "rng" not in cfg:
            cfg["rng"] = rng
        if "bound" in cfg:
            return UniformGenerator.symmetric(**cfg)
        return UniformGenerator(**cfg)
    if kind in {"gaussian", "normal"}:
        if rng is not None and "rng" not in cfg:
            cfg["rng"] = rng
        return GaussianGenerator(**cfg)
    raise ValueError(f"Unknown generator kind: {kind}")


def generator_from_config(
    cfg: MutationConfig, rng: np.random.Generator | None = None
) -> MutationGenerator:
    """Build the generator described by a :class:`MutationConfig`."""
    if rng is None and cfg.seed is not None:
        rng = np.random.default_rng(cfg.seed)
    if cfg.kind == "constant":
        return make_generator("constant", {"value": cfg.value})
    if cfg.kind == "uniform":
        return make_generator("uniform", {"low": cfg.low, "high": cfg.high}, rng=rng)
    return make_generator("gaussian", {"mean": cfg.mean, "scale": cfg.scale}, rng=rng)


__all__ = ["make_generator", "generator_from_config"]
