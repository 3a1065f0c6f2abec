from __future__ import annotations

import pytest

from genotype import BorrowError, RangedParam, Shared


class Gene(RangedParam):
    RANGE = (0.0, 10.0)


def test_clones_share_the_same_value() -> None:
    a = Shared(Gene(1.0))
    b = a.clone()
    assert a.ptr_eq(b)
    assert not a.ptr_eq(Shared(Gene(1.0)))

    with b.borrow_mut() as g:
        g.set(4.0)
    with a.borrow() as g:
        assert g.get() == 4.0


def test_multiple_readers_allowed() -> None:
    a = Shared(Gene(1.0))
    with a.borrow() as g1, a.clone().borrow() as g2:
        assert g1 is g2


def test_writer_excludes_readers_and_writers() -> None:
    a = Shared(Gene(1.0))
    with a.borrow_mut():
        assert a.is_borrowed_mut
        with pytest.raises(BorrowError):
            with a.borrow():
                pass
        with pytest.raises(BorrowError):
            with a.clone().borrow_mut():
                pass
    assert not a.is_borrowed_mut


def test_reader_excludes_writer() -> None:
    a = Shared(Gene(1.0))
    with a.borrow():
        with pytest.raises(BorrowError):
            with a.borrow_mut():
                pass
    with a.borrow_mut() as g:
        g.set(2.0)


def test_borrow_released_when_body_raises() -> None:
    a = Shared(Gene(1.0))
    with pytest.raises(KeyError):
        with a.borrow_mut():
            raise KeyError("boom")
    with a.borrow_mut():
        pass


def test_replace_returns_previous_value() -> None:
    a = Shared(Gene(1.0))
    old = a.replace(Gene(2.0))
    assert old == Gene(1.0)
    with a.borrow() as g:
        assert g == Gene(2.0)


def test_repr_hides_value_while_mutably_borrowed() -> None:
    a = Shared(Gene(1.0))
    assert repr(a) == "Shared(Gene(1.0))"
    with a.borrow_mut():
        assert repr(a) == "Shared(<borrowed>)"
