"""Static counterparts of the capability predicates.

These protocols let a static type checker reject non-conforming element
types before a program runs; the runtime predicates in this package
enforce the same requirements when the algorithms are called.
"""
from typing import Protocol, TypeVar

_T = TypeVar('_T')


class SupportsAddable(Protocol):
    def __add__(self: _T, other: _T) -> _T:
        ...


class SupportsComparable(Protocol):
    def __lt__(self: _T, other: _T) -> bool:
        ...

    def __gt__(self: _T, other: _T) -> bool:
        ...


class SupportsDivisionByCount(Protocol):
    def __truediv__(self, count: int):
        ...


class SupportsNumeric(SupportsAddable, SupportsComparable, Protocol):
    def __sub__(self: _T, other: _T) -> _T:
        ...

    def __mul__(self: _T, other: _T) -> _T:
        ...


class SupportsMean(SupportsAddable, SupportsDivisionByCount, Protocol):
    pass


class SupportsVariance(SupportsNumeric, SupportsDivisionByCount, Protocol):
    pass


AddableT = TypeVar('AddableT', bound=SupportsAddable)
ComparableT = TypeVar('ComparableT', bound=SupportsComparable)
MeanT = TypeVar('MeanT', bound=SupportsMean)
VarianceT = TypeVar('VarianceT', bound=SupportsVariance)
