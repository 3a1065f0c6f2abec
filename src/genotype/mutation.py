"""Gene mutation operators.

A mutation pass walks every gene of a holder in index order, asks a
:class:`MutationGenerator` for a delta, adds it and saturates the result
into the gene's own range::

    shape = Shared(Shape(...))
    mutate(shape.clone(), UniformGenerator.symmetric(0.1, rng=rng))
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, runtime_checkable

import numpy as np

from .base import Param, clamp
from .errors import ContractViolation
from .shared import exclusive

logger = logging.getLogger(__name__)


@runtime_checkable
class MutationGenerator(Protocol):
    """Produces values that are added to genes during :func:`mutate`."""

    def next_delta(self) -> Param:
        """Return the delta for the next gene."""


class ConstantGenerator(MutationGenerator):
    """Returns the same delta on every call."""

    def __init__(self, value: Param) -> None:
        self.value = float(value)

    def next_delta(self) -> Param:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantGenerator({self.value!r})"


class UniformGenerator(MutationGenerator):
    """Uniform random deltas in ``[low, high)``."""

    def __init__(
        self, low: Param, high: Param, rng: np.random.Generator | None = None
    ) -> None:
        if not low <= high:
            raise ValueError("low must be <= high")
        self.low = float(low)
        self.high = float(high)
        self._rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def symmetric(
        cls, bound: Param, rng: np.random.Generator | None = None
    ) -> "UniformGenerator":
        """Deltas in ``[-bound, bound)``."""
        if bound < 0.0:
            raise ValueError("bound must be >= 0")
        return cls(-bound, bound, rng=rng)

    def next_delta(self) -> Param:
        return float(self._rng.uniform(self.low, self.high))


class GaussianGenerator(MutationGenerator):
    """Normally distributed deltas."""

    def __init__(
        self,
        scale: Param,
        mean: Param = 0.0,
        rng: np.random.Generator | None = None,
    ) -> None:
        if scale < 0.0:
            raise ValueError("scale must be >= 0")
        self.scale = float(scale)
        self.mean = float(mean)
        self._rng = rng if rng is not None else np.random.default_rng()

    def next_delta(self) -> Param:
        return float(self._rng.normal(loc=self.mean, scale=self.scale))


class SequenceGenerator(MutationGenerator):
    """Replays a fixed sequence of deltas, optionally cycling."""

    def __init__(self, values: Iterable[Param], cycle: bool = False) -> None:
        self.values = [float(v) for v in values]
        if cycle and not self.values:
            raise ValueError("a cycling sequence needs at least one value")
        self.cycle = cycle
        self._pos = 0

    def next_delta(self) -> Param:
        if self._pos >= len(self.values):
            if not self.cycle:
                raise ContractViolation(
                    f"sequence exhausted after {len(self.values)} deltas"
                )
            self._pos = 0
        value = self.values[self._pos]
        self._pos += 1
        return value


def mutate(param_holder, mut_gen: MutationGenerator) -> int:
    """Add one generated delta to every gene of ``param_holder``.

    ``param_holder`` is normally a :class:`~genotype.shared.Shared` handle,
    which stays mutably borrowed for the whole pass. Each result is clamped
    into the gene's range; a NaN result raises
    :class:`~genotype.errors.ContractViolation`. The pass is not
    transactional: if an error is raised part way through, genes already
    visited keep their new value.

    Returns:
        The number of genes written.
    """
    with exclusive(param_holder) as holder:
        n = holder.param_count()
        logger.debug("mutating %d genes of %s", n, type(holder).__name__)

        for i in range(n):
            param = holder.get_param(i)
            lo, hi = param.range()
            raw = param.get() + float(mut_gen.next_delta())
            value = clamp(raw, lo, hi)
            if value != raw:
                logger.debug("gene %d saturated: %r -> %r", i, raw, value)
            param.set(value)
    return n


__all__ = [
    "MutationGenerator",
    "ConstantGenerator",
    "UniformGenerator",
    "GaussianGenerator",
    "SequenceGenerator",
    "clamp",
    "mutate",
]
