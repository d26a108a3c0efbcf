"""Fixed-arity counterparts of the aggregate algorithms.

Arguments are unified to their common type before folding (see
`numcore.capability.types.common_type`). Each function takes at least one
argument by signature, so calling one with no arguments is rejected by
the interpreter.
"""
import logging
from typing import Any, List, Optional, Tuple

from numcore.capability import (Addable, Capability, Comparable,
                                DivisibleByCount, Numeric, cast, common_type,
                                mean_type, require)

logger = logging.getLogger(__name__)


def unify(args: Tuple[Any, ...],
          capability: Optional[Capability] = None) -> Tuple[type, List[Any]]:
    """Converts arguments to their common type.

    If `capability` is given, every distinct argument type is checked
    against it first.

    Returns:
        The common type and the converted arguments, in order.

    Raises:
        CapabilityError: If an argument type lacks `capability`, or if the
        argument types have no common type.
    """
    samples = {}
    for arg in args:
        samples.setdefault(type(arg), arg)
    if capability is not None:
        for t, sample in samples.items():
            require(t, capability, sample=sample)
    common = common_type(*samples)
    logger.debug('unify: %s -> %s',
                 ', '.join(t.__name__ for t in samples), common.__name__)
    return common, [cast(arg, common) for arg in args]


def sum_variadic(first: Any, *rest: Any) -> Any:
    """Sums the arguments left to right in their common type."""
    _, vals = unify((first, ) + rest, Addable)
    total = vals[0]
    for val in vals[1:]:
        total = total + val
    return total


def mean_variadic(first: Any, *rest: Any) -> Any:
    """Averages the arguments in the promoted common type."""
    common, vals = unify((first, ) + rest, Addable)
    result_t = mean_type(common)
    logger.debug('mean_variadic: result type %s', result_t.__name__)
    require(result_t, DivisibleByCount)
    total = cast(vals[0], result_t)
    for val in vals[1:]:
        total = total + cast(val, result_t)
    return total / len(vals)


def variance_variadic(first: Any, *rest: Any) -> Any:
    """Computes the population variance of the arguments.

    Integral common types are computed in a floating working type, all
    others in the common type itself.
    """
    args = (first, ) + rest
    common, vals = unify(args, Numeric)
    working_t = mean_type(common)
    logger.debug('variance_variadic: working type %s', working_t.__name__)
    require(working_t, DivisibleByCount)
    avg = mean_variadic(*args)

    total = None
    for val in vals:
        deviation = cast(val, working_t) - avg
        squared = deviation * deviation
        total = squared if total is None else total + squared
    return total / len(vals)


def max_variadic(first: Any, *rest: Any) -> Any:
    """Finds the maximum argument (in the common type) by `>`.

    The first argument is the initial maximum; a later argument replaces it
    only if strictly greater.
    """
    common, vals = unify((first, ) + rest)
    require(common, Comparable, sample=vals[0])
    best = vals[0]
    for val in vals[1:]:
        if val > best:
            best = val
    return best
