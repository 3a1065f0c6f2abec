from __future__ import annotations

import numpy as np
import pytest

from genotype import (
    ContractViolation,
    ParamGroup,
    ParamHolder,
    ParamSet2d,
    RangedParam,
    Shared,
    get_genes,
    iter_params,
    set_genes,
    validate_holder,
)


class Dimension(RangedParam):
    RANGE = (1.0, 20.0)


class Rotation(RangedParam):
    RANGE = (0.0, 360.0)


class WrappingHolder(ParamHolder):
    """Resolves indices modulo its size instead of rejecting them."""

    def __init__(self) -> None:
        self.x = Rotation(0.0)
        self.y = Rotation(1.0)

    def param_count(self) -> int:
        return 2

    def get_param(self, index: int):
        return (self.x, self.y)[index % 2]


class AliasingHolder(ParamHolder):
    def __init__(self) -> None:
        self.x = Rotation(0.0)

    def param_count(self) -> int:
        return 2

    def get_param(self, index: int):
        if index in (0, 1):
            return self.x
        raise IndexError(index)


def make_group() -> ParamGroup:
    return ParamGroup(ParamSet2d(Dimension(2.0), Dimension(3.0)), Rotation(90.0))


def test_get_genes_returns_flat_vector() -> None:
    genes = get_genes(Shared(make_group()))
    assert genes.dtype == float
    assert np.allclose(genes, [2.0, 3.0, 90.0])


def test_iter_params_follows_index_order() -> None:
    group = make_group()
    assert [p.get() for p in iter_params(group)] == [2.0, 3.0, 90.0]


def test_set_genes_writes_back_with_clamping() -> None:
    group = make_group()
    set_genes(group, [0.0, 5.0, 400.0])
    assert get_genes(group).tolist() == [1.0, 5.0, 360.0]


def test_set_genes_length_mismatch() -> None:
    with pytest.raises(ValueError):
        set_genes(make_group(), [1.0, 2.0])


def test_validate_holder_accepts_well_formed_tree() -> None:
    assert validate_holder(Shared(make_group())) == 3
    assert validate_holder(ParamGroup()) == 0


def test_validate_holder_rejects_wrapping_index() -> None:
    with pytest.raises(ContractViolation):
        validate_holder(WrappingHolder())


def test_validate_holder_rejects_aliased_leaf() -> None:
    with pytest.raises(ContractViolation):
        validate_holder(AliasingHolder())


def test_set_genes_rejects_nan() -> None:
    d = Dimension(2.0)
    with pytest.raises(ContractViolation):
        set_genes(d, [float("nan")])
    assert d.get() == 2.0
