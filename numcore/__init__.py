"""Generic numeric algorithms over capability-checked element types."""
import logging

from numcore.capability import CapabilityError, mean_type, common_type
from numcore.algorithms import (EmptyInputError, sum, mean, variance,
                                max_element, transform_reduce)
from numcore.variadic import (sum_variadic, mean_variadic, variance_variadic,
                              max_variadic)
from numcore.vector import Vec
from numcore.vector3d import Vector3D

logging.getLogger(__name__).addHandler(logging.NullHandler())
