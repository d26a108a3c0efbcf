"""Container checks and element type resolution."""
import logging
from collections.abc import Iterable, Sized
from typing import Any, Optional

import numpy as np

from numcore.capability._error import CapabilityError, type_name
from numcore.capability._predicates import NO_SAMPLE
from numcore.capability.types import DEFAULT_DTYPE

logger = logging.getLogger(__name__)


def require_sized_iterable(container: Any) -> None:
    """Raises:
        CapabilityError: If `container` is not a sized, iterable,
        one-dimensional container.
    """
    missing = []
    if not isinstance(container, Sized):
        missing.append('does not define `len()`')
    if not isinstance(container, Iterable):
        missing.append('does not support iteration')
    if not missing and getattr(container, 'ndim', 1) != 1:
        missing.append(f'has {container.ndim} dimensions, not 1')
    if missing:
        raise CapabilityError(type(container), 'SizedIterable', missing)


def element_type(container: Any, dtype: Optional[type] = None) -> type:
    """Resolves the element type of a homogeneous container.

    Resolution order: an explicit `dtype`, the container's own `dtype`
    (`Vec` or NumPy array), the single type shared by all elements, and
    finally `DEFAULT_DTYPE` for empty untyped containers.

    Raises:
        CapabilityError: If `container` is not sized and iterable, or if
        its elements do not share one type.
    """
    require_sized_iterable(container)
    if dtype is not None:
        for val in container:
            if not isinstance(val, dtype):
                raise CapabilityError(dtype, 'homogeneous', [
                    f'element {val!r} has type {type_name(type(val))}'
                ])
        return dtype

    container_dtype = getattr(container, 'dtype', None)
    if isinstance(container_dtype, np.dtype):
        return container_dtype.type
    if isinstance(container_dtype, type):
        return container_dtype

    types = list(dict.fromkeys(type(val) for val in container))
    if not types:
        logger.debug('Empty untyped container; assuming element type %s.',
                     type_name(DEFAULT_DTYPE))
        return DEFAULT_DTYPE
    if len(types) > 1:
        raise CapabilityError(types[0], 'homogeneous', [
            'collection elements have multiple types: '
            f'{", ".join(type_name(t) for t in types)}'
        ])
    return types[0]


def first_element(container: Any) -> Any:
    """Returns the first element of a sized container (`NO_SAMPLE` if empty)."""
    if len(container) == 0:
        return NO_SAMPLE
    return next(iter(container))
