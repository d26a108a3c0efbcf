"""Generic aggregate algorithms over sized, homogeneous collections.

Every algorithm resolves the element type of its input and checks it
against the capabilities it needs before touching the data, raising
`CapabilityError` if a required operation is missing. Only `max_element`
treats empty input as an error; the other aggregates return the zero
value of their result type.
"""
import logging
from typing import Any, Callable, Collection, Optional, TypeVar

from numcore.capability import (DEFAULT_DTYPE, Addable, CapabilityError,
                                Comparable, DivisibleByCount, Numeric, cast,
                                element_type, first_element, mean_type,
                                require, require_sized_iterable, zero_value)
from numcore.capability._error import type_name
from numcore.capability.protocols import (AddableT, ComparableT, MeanT,
                                          VarianceT)

logger = logging.getLogger(__name__)

R = TypeVar('R')


class EmptyInputError(ValueError):
    """Raised when an algorithm that needs at least one element gets none."""


def sum(container: Collection[AddableT],
        dtype: Optional[type] = None) -> AddableT:
    """Sums a collection left to right, starting from the zero value.

    Returns:
        The zero value of the element type if `container` is empty.
    """
    t = element_type(container, dtype)
    require(t, Addable, sample=first_element(container))
    logger.debug('sum: element type %s', t.__name__)
    total = zero_value(t)
    for val in container:
        total = total + val
    return total


def _accumulate_mean(container: Collection, result_t: type) -> Any:
    total = zero_value(result_t)
    for val in container:
        total += cast(val, result_t)
    return total / len(container)


def mean(container: Collection[MeanT], dtype: Optional[type] = None) -> Any:
    """Computes the arithmetic mean of a collection.

    The sum is accumulated in the promoted result type (`float` for
    integral elements, the element type otherwise) and divided by the
    element count.

    Returns:
        The zero value of the result type if `container` is empty.
    """
    t = element_type(container, dtype)
    require(t, Addable, DivisibleByCount, sample=first_element(container))
    result_t = mean_type(t)
    logger.debug('mean: element type %s, result type %s', t.__name__,
                 result_t.__name__)
    if len(container) == 0:
        return zero_value(result_t)
    return _accumulate_mean(container, result_t)


def variance(container: Collection[VarianceT],
             dtype: Optional[type] = None) -> Any:
    """Computes the population variance of a collection (two passes).

    The deviations from the mean are squared and averaged over the element
    count (no n - 1 correction).

    Returns:
        The zero value of the result type if `container` is empty.
    """
    t = element_type(container, dtype)
    require(t, Numeric, DivisibleByCount, sample=first_element(container))
    result_t = mean_type(t)
    logger.debug('variance: element type %s, result type %s', t.__name__,
                 result_t.__name__)
    if len(container) == 0:
        return zero_value(result_t)

    avg = _accumulate_mean(container, result_t)
    total = zero_value(result_t)
    for val in container:
        deviation = cast(val, result_t) - avg
        total += deviation * deviation
    return total / len(container)


def max_element(container: Collection[ComparableT],
                dtype: Optional[type] = None) -> ComparableT:
    """Finds the maximum of a collection by `>`.

    Ties keep the earliest maximal element.

    Raises:
        EmptyInputError: If `container` is empty.
    """
    t = element_type(container, dtype)
    require(t, Comparable, sample=first_element(container))
    logger.debug('max_element: element type %s', t.__name__)
    if len(container) == 0:
        raise EmptyInputError('max_element() of an empty collection.')

    it = iter(container)
    best = next(it)
    for val in it:
        if val > best:
            best = val
    return best


def transform_reduce(container: Collection,
                     fn: Callable[[Any], R],
                     result_type: Optional[type] = None) -> R:
    """Maps `fn` over a collection and sums the results like `sum`.

    The mapped values must share one Addable type (`result_type`, if
    given). An empty collection yields the zero value of `result_type`
    (or of the default element type).
    """
    require_sized_iterable(container)
    if len(container) == 0:
        t = DEFAULT_DTYPE if result_type is None else result_type
        require(t, Addable)
        return zero_value(t)

    # Only the first mapped value is computed before the capability check.
    it = iter(container)
    first = fn(next(it))
    t = type(first) if result_type is None else result_type
    exact = result_type is None
    _check_mapped(first, t, exact)
    require(t, Addable, sample=first)
    logger.debug('transform_reduce: mapped type %s', t.__name__)

    total = zero_value(t) + first
    for val in it:
        mapped = fn(val)
        _check_mapped(mapped, t, exact)
        total = total + mapped
    return total


def _check_mapped(val: Any, t: type, exact: bool) -> None:
    matches = type(val) is t if exact else isinstance(val, t)
    if not matches:
        raise CapabilityError(t, 'homogeneous', [
            f'mapped value {val!r} has type {type_name(type(val))}'
        ])
