"""Typed, sized vectors of homogeneous elements."""
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from numcore import algorithms
from numcore.capability import element_type

V = TypeVar('V')


class Vec(Generic[V]):
    """An immutable vector that records its element type.

    Unlike a plain list, an empty `Vec` still knows its element type, so
    aggregates over it return the zero value of the right type.

    Raises:
        CapabilityError: If the elements do not share one type (or are not
        instances of `dtype`, if given).
    """
    def __init__(self, vals: Iterable[V], dtype: Optional[type] = None):
        self._vals = tuple(vals)
        self.dtype = element_type(self._vals, dtype)

    @classmethod
    def of(cls, dtype: type) -> 'Vec':
        """Makes an empty vector with element type `dtype`."""
        return cls((), dtype)

    def __len__(self) -> int:
        return len(self._vals)

    def __iter__(self) -> Iterator[V]:
        return iter(self._vals)

    def __getitem__(self, idx: int) -> V:
        return self._vals[idx]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self.dtype is other.dtype and self._vals == other._vals

    def __repr__(self):
        return f'Vec[{self.dtype.__name__}]({list(self._vals)})'

    def max(self) -> V:
        return algorithms.max_element(self)

    def sum(self) -> V:
        return algorithms.sum(self)

    def mean(self) -> Any:
        return algorithms.mean(self)

    def variance(self) -> Any:
        return algorithms.variance(self)

    def count(self) -> int:
        return len(self._vals)

    def map(self, fn, result_type: Optional[type] = None) -> 'Vec':
        """Applies `fn` to each element, yielding a new vector."""
        return Vec((fn(val) for val in self._vals), result_type)

    def map_sum(self, fn, result_type: Optional[type] = None) -> Any:
        return algorithms.transform_reduce(self, fn, result_type)
