"""Mutate a 2D shape in place through its flat genotype.

Run:
    python examples/shape_mutation.py
"""

from __future__ import annotations

import logging

import numpy as np

from genotype import (
    CompositeHolder,
    ConstantGenerator,
    ParamSet2d,
    RangedParam,
    Shared,
    get_genes,
    make_generator,
    mutate,
)


class Dimension(RangedParam):
    """A length along one axis, in metres."""

    RANGE = (1.0, 20.0)


class Rotation(RangedParam):
    """Rotation in degrees."""

    RANGE = (0.0, 360.0)


class Shape(CompositeHolder):
    """A 2D cuboid with a rotation: 2 genes for dimensions + 1 for rotation."""

    def __init__(self, dimensions: ParamSet2d, rotation: Rotation) -> None:
        self.dimensions = dimensions
        self.rotation = rotation

    def children(self):
        return (self.dimensions, self.rotation)

    def __repr__(self) -> str:
        return f"Shape(dimensions={self.dimensions!r}, rotation={self.rotation!r})"


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    shape = Shared(
        Shape(ParamSet2d(Dimension(0.5), Dimension(0.5)), Rotation(0.0))
    )
    print(f"shape: {shape}")

    mutate(shape.clone(), ConstantGenerator(0.1))
    print(f"mutated shape: {shape}")

    gen = make_generator("gaussian", {"scale": 2.0}, rng=np.random.default_rng(0))
    for _ in range(5):
        mutate(shape.clone(), gen)
    print(f"genes after 5 gaussian passes: {get_genes(shape).tolist()}")


if __name__ == "__main__":
    main()
