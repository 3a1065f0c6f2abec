"""Flat views over the genes of a holder.

All helpers accept either a bare :class:`~genotype.base.ParamHolder` or a
:class:`~genotype.shared.Shared` handle to one.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .base import ParamHolder, RangedValue, clamp
from .errors import ContractViolation
from .shared import exclusive, shared


def iter_params(holder: ParamHolder) -> Iterator[RangedValue]:
    """Yield every gene of a bare holder in index order."""
    for i in range(holder.param_count()):
        yield holder.get_param(i)


def get_genes(param_holder) -> np.ndarray:
    """Return the gene values as a 1D float array."""
    with shared(param_holder) as holder:
        return np.array([p.get() for p in iter_params(holder)], dtype=float)


def set_genes(param_holder, values) -> None:
    """Write a flat vector of values back, clamping each into its range."""
    values = np.asarray(values, dtype=float).reshape(-1)
    with exclusive(param_holder) as holder:
        n = holder.param_count()
        if values.size != n:
            raise ValueError(f"expected {n} values, got {values.size}")
        for param, v in zip(iter_params(holder), values.tolist()):
            lo, hi = param.range()
            param.set(clamp(v, lo, hi))


def validate_holder(param_holder) -> int:
    """Check that a holder's index space is a bijection onto its leaves.

    A full sweep must yield ``param_count()`` distinct genes with valid
    ranges, and index ``param_count()`` must be rejected.

    Returns:
        The number of genes.
    """
    with shared(param_holder) as holder:
        n = holder.param_count()
        if n < 0:
            raise ContractViolation(f"param_count() returned {n}")

        seen: set[int] = set()
        for i, param in enumerate(iter_params(holder)):
            if not isinstance(param, RangedValue):
                raise ContractViolation(f"index {i} resolved to non-gene {param!r}")
            lo, hi = param.range()
            if not lo <= hi:
                raise ContractViolation(f"gene {i} has invalid range ({lo}, {hi})")
            if id(param) in seen:
                raise ContractViolation(f"gene {i} is reachable from two indices")
            seen.add(id(param))

        try:
            extra = holder.get_param(n)
        except (IndexError, ContractViolation):
            return n
        raise ContractViolation(f"index {n} resolved to {extra!r} past param_count()")


__all__ = ["iter_params", "get_genes", "set_genes", "validate_holder"]
