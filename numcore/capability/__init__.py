"""Capability predicates and type rules for the generic algorithms."""
from numcore.capability._error import CapabilityError
from numcore.capability._predicates import (
    Capability, ClosedUnder, Ordered, DividesByCount, AllOf, Addable,
    Subtractable, Multipliable, Comparable, DivisibleByCount, Numeric,
    NO_SAMPLE, require)
from numcore.capability._containers import (require_sized_iterable,
                                            element_type, first_element)
from numcore.capability.types import (DEFAULT_DTYPE, common_type, mean_type,
                                      is_integral, cast, zero_value)
