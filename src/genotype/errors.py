"""Exceptions signalling misuse of the genotype protocols."""

from __future__ import annotations


class ContractViolation(RuntimeError):
    """A programming error: a protocol was used outside its contract.

    These are raised eagerly and are meant to surface in tests, not to be
    caught and recovered from.
    """


class ParamIndexError(ContractViolation, IndexError):
    """``get_param`` was called with an index outside ``[0, param_count())``."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Bad param index {index} (param_count={count})")
        self.index = index
        self.count = count


class BorrowError(ContractViolation):
    """Overlapping access to a :class:`~genotype.shared.Shared` value."""


__all__ = ["ContractViolation", "ParamIndexError", "BorrowError"]
