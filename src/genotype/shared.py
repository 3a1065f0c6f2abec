"""Shared, runtime-borrow-checked handle to a mutable phenotype root.

A :class:`Shared` lets several owners (e.g. the caller inspecting a shape
and the mutation pass editing it) reference the same object. Access goes
through :meth:`Shared.borrow` / :meth:`Shared.borrow_mut`; any overlap that
would let a writer coexist with another reader or writer raises
:class:`~genotype.errors.BorrowError` instead of waiting.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager, nullcontext
from typing import Any, ContextManager, Generic, Iterator, TypeVar

from .errors import BorrowError

T = TypeVar("T")


class _Cell:
    __slots__ = ("value", "readers", "writing", "lock")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.readers = 0
        self.writing = False
        self.lock = threading.Lock()


class Shared(Generic[T]):
    """Reference-counted cell with exclusive mutable borrows."""

    def __init__(self, value: T) -> None:
        self._cell = _Cell(value)

    def clone(self) -> "Shared[T]":
        """Return another handle to the same value."""
        other = object.__new__(type(self))
        other._cell = self._cell
        return other

    def ptr_eq(self, other: "Shared[Any]") -> bool:
        """True if both handles point at the same cell."""
        return self._cell is other._cell

    @property
    def is_borrowed_mut(self) -> bool:
        return self._cell.writing

    @contextmanager
    def borrow(self) -> Iterator[T]:
        """Shared read access; fails while a mutable borrow is active."""
        cell = self._cell
        with cell.lock:
            if cell.writing:
                raise BorrowError("already mutably borrowed")
            cell.readers += 1
        try:
            yield cell.value
        finally:
            with cell.lock:
                cell.readers -= 1

    @contextmanager
    def borrow_mut(self) -> Iterator[T]:
        """Exclusive access; fails while any other borrow is active."""
        cell = self._cell
        with cell.lock:
            if cell.writing:
                raise BorrowError("already mutably borrowed")
            if cell.readers:
                raise BorrowError(f"already borrowed by {cell.readers} reader(s)")
            cell.writing = True
        try:
            yield cell.value
        finally:
            with cell.lock:
                cell.writing = False

    def replace(self, value: T) -> T:
        """Swap in a new value and return the old one."""
        with self.borrow_mut() as old:
            self._cell.value = value
        return old

    def __repr__(self) -> str:
        if self._cell.writing:
            return "Shared(<borrowed>)"
        return f"Shared({self._cell.value!r})"


def exclusive(obj: Any) -> ContextManager[Any]:
    """Mutable access to ``obj``, borrowing it first if it is a :class:`Shared`."""
    if isinstance(obj, Shared):
        return obj.borrow_mut()
    return nullcontext(obj)


def shared(obj: Any) -> ContextManager[Any]:
    """Read access to ``obj``, borrowing it first if it is a :class:`Shared`."""
    if isinstance(obj, Shared):
        return obj.borrow()
    return nullcontext(obj)


__all__ = ["Shared", "exclusive", "shared"]
