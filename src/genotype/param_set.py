"""Helper holders for collections of related parameters.

``ParamSet2d`` and ``ParamSet3d`` bundle a fixed number of children (usually
leaves of one gene type, e.g. the extents of a shape along each axis);
``ParamGroup`` does the same for any number of children.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .base import CompositeHolder, Param, ParamHolder


class ParamSet(CompositeHolder):
    """A composite of related parameters with a fixed arity."""

    def components(self) -> Tuple[Param, ...]:
        """Return the value of every gene in index order."""
        return tuple(
            self.get_param(i).get() for i in range(self.param_count())
        )


@dataclass(frozen=True)
class ParamSet2d(ParamSet):
    """A 2D parameter set containing ``x`` and ``y``."""

    x: ParamHolder
    y: ParamHolder

    def __post_init__(self) -> None:
        self._check_children()

    def children(self) -> Sequence[ParamHolder]:
        return (self.x, self.y)


@dataclass(frozen=True)
class ParamSet3d(ParamSet):
    """A 3D parameter set containing ``x``, ``y`` and ``z``."""

    x: ParamHolder
    y: ParamHolder
    z: ParamHolder

    def __post_init__(self) -> None:
        self._check_children()

    def children(self) -> Sequence[ParamHolder]:
        return (self.x, self.y, self.z)


class ParamGroup(CompositeHolder):
    """Composite over a variable number of children, in the given order."""

    def __init__(self, *children: ParamHolder) -> None:
        self._children: Tuple[ParamHolder, ...] = tuple(children)
        self._check_children()

    def children(self) -> Sequence[ParamHolder]:
        return self._children

    def __len__(self) -> int:
        return len(self._children)

    def __getitem__(self, i: int) -> ParamHolder:
        return self._children[i]

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self._children)
        return f"ParamGroup({inner})"


__all__ = ["ParamSet", "ParamSet2d", "ParamSet3d", "ParamGroup"]
