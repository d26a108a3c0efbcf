"""Structural capability predicates on element types."""
import logging
from abc import ABC, abstractmethod
from typing import Any, List

from numcore.capability._error import CapabilityError, type_name
from numcore.capability.opcodes import (BinOpcode, CmpOpcode, OPCODE_TO_FN,
                                        OPCODE_TO_METHOD_NAME, OPCODE_TO_REPR)

logger = logging.getLogger(__name__)

# Sentinel for "no sample value available" (`None` is a valid sample).
NO_SAMPLE = object()

# Count used when probing division by a count.
PROBE_COUNT = 1


def defines(t: type, opcode) -> bool:
    """Determines if `t` defines the operator method for `opcode`.

    Methods inherited unchanged from `object` (e.g. the default `__lt__`)
    do not count.
    """
    name = f'__{OPCODE_TO_METHOD_NAME[opcode]}__'
    method = getattr(t, name, None)
    return method is not None and method is not getattr(object, name, None)


def probe_samples(t: type, sample: Any = NO_SAMPLE) -> List[Any]:
    """Chooses values of type `t` to probe operations on.

    An explicit sample (typically the first element of a collection) takes
    precedence; otherwise the zero value `t()` is used, if it exists.
    """
    if sample is not NO_SAMPLE:
        return [sample]
    try:
        return [t()]
    except (TypeError, ValueError):
        return []


class Capability(ABC):
    """A named structural requirement on an element type."""
    name: str

    @abstractmethod
    def violations(self, t: type, sample: Any = NO_SAMPLE) -> List[str]:
        """Lists the reasons `t` fails the requirement (empty if it holds)."""

    def __call__(self, t: type, sample: Any = NO_SAMPLE) -> bool:
        return not self.violations(t, sample)

    def __and__(self, other: 'Capability') -> 'AllOf':
        return AllOf(f'{self.name} & {other.name}', self, other)

    def __repr__(self):
        return f'Capability({self.name})'


class ClosedUnder(Capability):
    """Requires `T <op> T` to yield exactly `T`."""
    def __init__(self, name: str, op: BinOpcode):
        self.name = name
        self.op = op

    def violations(self, t: type, sample: Any = NO_SAMPLE) -> List[str]:
        op_repr = OPCODE_TO_REPR[self.op]
        if not defines(t, self.op):
            return [f'{type_name(t)} does not define `{op_repr}`']
        missing = []
        operator_fn = OPCODE_TO_FN[self.op]
        for val in probe_samples(t, sample):
            try:
                result = operator_fn(val, val)
            except TypeError as e:
                missing.append(f'`{type_name(t)} {op_repr} {type_name(t)}` '
                               f'is not supported ({e})')
                continue
            if type(result) is not t:
                missing.append(f'`{type_name(t)} {op_repr} {type_name(t)}` '
                               f'yields {type_name(type(result))}, '
                               f'not {type_name(t)}')
        return missing


class Ordered(Capability):
    """Requires `T < T` and `T > T`, both convertible to `bool`."""
    OPS = (CmpOpcode.LT, CmpOpcode.GT)

    def __init__(self, name: str):
        self.name = name

    def violations(self, t: type, sample: Any = NO_SAMPLE) -> List[str]:
        missing = [
            f'{type_name(t)} does not define `{OPCODE_TO_REPR[op]}`'
            for op in Ordered.OPS if not defines(t, op)
        ]
        if missing:
            return missing
        for val in probe_samples(t, sample):
            for op in Ordered.OPS:
                op_repr = OPCODE_TO_REPR[op]
                try:
                    bool(OPCODE_TO_FN[op](val, val))
                except (TypeError, ValueError) as e:
                    missing.append(f'`{type_name(t)} {op_repr} '
                                   f'{type_name(t)}` is not a boolean ({e})')
        return missing


class DividesByCount(Capability):
    """Requires `T / n` to be defined for an integer count `n`."""
    def __init__(self, name: str):
        self.name = name

    def violations(self, t: type, sample: Any = NO_SAMPLE) -> List[str]:
        if not defines(t, BinOpcode.DIV):
            return [f'{type_name(t)} does not define `/`']
        missing = []
        for val in probe_samples(t, sample):
            try:
                val / PROBE_COUNT
            except TypeError as e:
                missing.append(
                    f'`{type_name(t)} / int` is not supported ({e})')
        return missing


class AllOf(Capability):
    """Conjunction of capabilities."""
    def __init__(self, name: str, *parts: Capability):
        self.name = name
        self.parts = parts

    def violations(self, t: type, sample: Any = NO_SAMPLE) -> List[str]:
        missing = []
        for part in self.parts:
            missing += part.violations(t, sample)
        return missing


Addable = ClosedUnder('Addable', BinOpcode.ADD)
Subtractable = ClosedUnder('Subtractable', BinOpcode.SUB)
Multipliable = ClosedUnder('Multipliable', BinOpcode.MUL)
Comparable = Ordered('Comparable')
DivisibleByCount = DividesByCount('DivisibleByCount')
Numeric = AllOf('Numeric', Addable, Comparable, Subtractable, Multipliable)


def require(t: type, *capabilities: Capability,
            sample: Any = NO_SAMPLE) -> None:
    """Checks `t` against capabilities before any computation.

    Raises:
        CapabilityError: For the first capability `t` does not satisfy.
    """
    for capability in capabilities:
        missing = capability.violations(t, sample)
        if missing:
            logger.debug('Rejected type %s: not %s (%s)', type_name(t),
                         capability.name, '; '.join(missing))
            raise CapabilityError(t, capability.name, missing)
