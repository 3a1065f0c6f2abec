"""Core protocols for indexable, range-bounded genes.

A phenotype is any nested structure whose leaves are :class:`RangedValue`
genes. Every node of the structure, leaf or composite, implements
:class:`ParamHolder` so that its genes can be addressed by a flat integer
index in ``[0, param_count())``. Composites partition that index space into
contiguous blocks, one per child, in declaration order.
"""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

from .errors import ContractViolation, ParamIndexError

# The type of a single gene.
Param = float


def clamp(value: Param, lo: Param, hi: Param) -> Param:
    """Saturate ``value`` into the inclusive interval ``[lo, hi]``.

    Raises:
        ContractViolation: If ``value`` is NaN, which has no place in any range.
    """
    if np.isnan(value):
        raise ContractViolation(f"cannot clamp NaN into [{lo}, {hi}]")
    return float(np.clip(value, lo, hi))


@runtime_checkable
class RangedValue(Protocol):
    """A single gene with a fixed, inclusive legal range.

    Implementations only provide data access. Keeping the value inside
    :meth:`range` is the job of whoever writes to it (see
    :func:`genotype.mutation.mutate`).
    """

    def range(self) -> Tuple[Param, Param]:
        """Return the allowed interval as ``(lo, hi)`` with ``lo <= hi``."""

    def get(self) -> Param:
        """Return the current gene value."""

    def set(self, value: Param) -> None:
        """Overwrite the gene value."""


@runtime_checkable
class ParamHolder(Protocol):
    """Anything exposing its genes through a flat index."""

    def param_count(self) -> int:
        """Number of genes reachable from this node."""

    def get_param(self, index: int) -> RangedValue:
        """Return the gene at ``index``.

        Raises:
            ParamIndexError: If ``index`` is outside ``[0, param_count())``.
        """


class RangedParam(RangedValue, ParamHolder):
    """Leaf gene holding one :data:`Param`.

    Subclasses declare their range with a class attribute::

        class Rotation(RangedParam):
            RANGE = (0.0, 360.0)

    The initial value is stored as given, even outside the range; it is
    brought into range on the first mutation.
    """

    RANGE: Tuple[Param, Param] = (0.0, 1.0)

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        lo, hi = cls.RANGE
        if not lo <= hi:
            raise ContractViolation(
                f"{cls.__name__}.RANGE must satisfy lo <= hi, got {cls.RANGE!r}"
            )

    def __init__(self, value: Param = 0.0) -> None:
        self.value = float(value)

    def range(self) -> Tuple[Param, Param]:
        lo, hi = self.RANGE
        return float(lo), float(hi)

    def get(self) -> Param:
        return self.value

    def set(self, value: Param) -> None:
        self.value = float(value)

    def normalized(self) -> Param:
        """Return the value as a fraction of the range (``0.0`` at ``lo``)."""
        lo, hi = self.range()
        if hi == lo:
            return 0.0
        return (self.value - lo) / (hi - lo)

    def set_normalized(self, fraction: Param) -> None:
        """Set the value from a fraction of the range, saturating at the ends."""
        lo, hi = self.range()
        self.value = clamp(lo + float(fraction) * (hi - lo), lo, hi)

    # A leaf is a holder of exactly one gene: itself.
    def param_count(self) -> int:
        return 1

    def get_param(self, index: int) -> RangedValue:
        if index != 0:
            raise ParamIndexError(index, 1)
        return self

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class CompositeHolder(ParamHolder):
    """Holder whose genes are the concatenation of its children's genes.

    Subclasses implement :meth:`children`; indices are dispatched by
    subtracting the gene counts of the preceding children.
    """

    def children(self) -> Sequence[ParamHolder]:
        raise NotImplementedError

    def _check_children(self) -> None:
        seen: set[int] = set()
        for child in self.children():
            for i in range(child.param_count()):
                param = child.get_param(i)
                if id(param) in seen:
                    raise ContractViolation(
                        f"{type(self).__name__} reaches the same gene twice: {param!r}"
                    )
                seen.add(id(param))

    def param_count(self) -> int:
        return sum(child.param_count() for child in self.children())

    def get_param(self, index: int) -> RangedValue:
        if index < 0:
            raise ParamIndexError(index, self.param_count())
        local = index
        for child in self.children():
            n = child.param_count()
            if local < n:
                return child.get_param(local)
            local -= n
        raise ParamIndexError(index, index - local)


__all__ = [
    "Param",
    "clamp",
    "RangedValue",
    "ParamHolder",
    "RangedParam",
    "CompositeHolder",
]
