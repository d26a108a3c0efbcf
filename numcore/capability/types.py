"""Basic types and type utility functions for capability checks."""
import numbers
from decimal import Decimal
from typing import Any, Optional

import numpy as np

from numcore.capability._error import CapabilityError, type_name

# Element type assumed for empty containers that carry no type information.
DEFAULT_DTYPE = int

# Widening order used to unify numbers; `bool` sits below every ABC.
NUMERIC_TOWER = [
    numbers.Integral, numbers.Rational, numbers.Real, numbers.Complex
]

# `Decimal` is exact like `Rational` but only absorbs `bool` and `int`.
DECIMAL_RANK = 2


def is_numpy_type(t: type) -> bool:
    """Determines if a type is a NumPy scalar type."""
    return isinstance(t, type) and issubclass(t, np.generic)


def is_integral(t: type) -> bool:
    """Determines if a type is a fixed-precision integer type.

    `bool` counts as integral, as do NumPy integer and boolean scalars.
    """
    if not isinstance(t, type):
        return False
    return issubclass(t, (numbers.Integral, np.integer, np.bool_))


def mean_type(t: type) -> type:
    """Maps an element type to the result type of division-based aggregates.

    Integral types promote to a floating type (`numpy.float64` for NumPy
    integers, `float` otherwise); all other types map to themselves.
    """
    if is_integral(t):
        return np.float64 if is_numpy_type(t) else float
    return t


def numeric_rank(t: type) -> Optional[int]:
    """Finds the position of a number type in the widening order.

    Returns:
        0 for booleans, 1-4 for the `numbers` ABCs (most specific match),
        `DECIMAL_RANK` for `Decimal`, or `None` if `t` is not a number type.
    """
    if not isinstance(t, type):
        return None
    if issubclass(t, (bool, np.bool_)):
        return 0
    if issubclass(t, Decimal):
        return DECIMAL_RANK
    for rank, abc in enumerate(NUMERIC_TOWER, start=1):
        if issubclass(t, abc):
            return rank
    return None


def common_type(*types: type) -> type:
    """Unifies argument types to a single type.

    Identical types unify to themselves. Number types unify to the widest
    type present in the widening order (NumPy scalars follow
    `numpy.result_type`).

    Raises:
        CapabilityError: If the types have no common type.
    """
    if not types:
        raise ValueError('Cannot unify an empty list of types.')
    first = types[0]
    if all(t is first for t in types):
        return first

    ranks = [numeric_rank(t) for t in types]
    if any(r is None for r in ranks):
        raise CapabilityError(
            first, 'unifiable',
            [f'no common type for {", ".join(type_name(t) for t in types)}'])

    if any(is_numpy_type(t) for t in types):
        try:
            unified = np.result_type(*types)
        except TypeError as e:
            raise CapabilityError(first, 'unifiable', [str(e)]) from e
        if unified.kind == 'O':
            raise CapabilityError(
                first, 'unifiable',
                [f'no NumPy common type for '
                 f'{", ".join(type_name(t) for t in types)}'])
        return unified.type

    if any(issubclass(t, Decimal) for t in types):
        inexact = [
            t for t in types
            if not issubclass(t, Decimal) and not issubclass(t, int)
        ]
        if inexact:
            raise CapabilityError(first, 'unifiable', [
                f'Decimal does not convert losslessly from '
                f'{", ".join(type_name(t) for t in inexact)}'
            ])

    widest, widest_rank = first, ranks[0]
    for t, rank in zip(types[1:], ranks[1:]):
        if rank > widest_rank:
            widest, widest_rank = t, rank
    return widest


def cast(value: Any, t: type) -> Any:
    """Converts `value` to type `t` (identity if it already has that type)."""
    if type(value) is t:
        return value
    return t(value)


def zero_value(t: type) -> Any:
    """Returns the zero (default-constructed) value of a type.

    Raises:
        CapabilityError: If `t` cannot be constructed without arguments.
    """
    try:
        return t()
    except (TypeError, ValueError) as e:
        raise CapabilityError(t, 'zero-initializable',
                              [f'{type_name(t)}(): {e}'])
