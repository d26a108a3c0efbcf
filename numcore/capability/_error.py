"""Errors raised by capability checks."""
from typing import Any, Iterable


def type_name(t: Any) -> str:
    return getattr(t, '__name__', repr(t))


class CapabilityError(TypeError):
    """Raised when an element type lacks operations an algorithm requires."""
    def __init__(self, dtype: Any, capability: str, missing: Iterable[str]):
        self.dtype = dtype
        self.capability = capability
        self.missing = list(missing)
        super().__init__(f'Type {type_name(dtype)} is not {capability}: '
                         f'{"; ".join(self.missing)}.')
