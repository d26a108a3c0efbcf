"""Tests for the collection-based aggregate algorithms."""
import pytest
import numpy as np
from fractions import Fraction
from numcore import (CapabilityError, EmptyInputError, Vector3D, sum, mean,
                     variance, max_element, transform_reduce)

INT_SEQUENCES = [
    [1, 2, 3, 4],
    [7],
    [-3, 0, 3],
    [10, 1, 10, 1, 10],
    [2**40, 3, 5],
]


@pytest.fixture
def unit_vectors():
    return [Vector3D(1, 0, 0), Vector3D(0, 1, 0), Vector3D(0, 0, 1)]


def test_sum_ints():
    result = sum([1, 2, 3, 4])
    assert result == 10
    assert type(result) is int


def test_sum_floats_in_insertion_order():
    vals = [0.1, 0.2, 0.3]
    assert sum(vals) == ((0.0 + 0.1) + 0.2) + 0.3


@pytest.mark.parametrize('vals', INT_SEQUENCES, ids=str)
def test_mean_ints_promotes_to_float(vals):
    result = mean(vals)
    assert type(result) is float
    assert result == float(sum(vals)) / len(vals)


def test_mean_not_truncated():
    assert mean([1, 2]) == 1.5


def test_mean_fractions_keep_type():
    result = mean([Fraction(1, 3), Fraction(2, 3)])
    assert result == Fraction(1, 2)
    assert type(result) is Fraction


def test_variance_ints():
    result = variance([1, 2, 3, 4])
    assert result == 1.25
    assert type(result) is float


@pytest.mark.parametrize('vals', INT_SEQUENCES + [[0.5, 1.5, 4.0]], ids=str)
def test_variance_is_mean_squared_deviation(vals):
    avg = mean(vals)
    expected = mean([(float(x) - avg) * (float(x) - avg) for x in vals])
    assert variance(vals) == pytest.approx(expected)


def test_variance_population_formula():
    # Sample variance of {2, 4} would be 2.0.
    assert variance([2, 4]) == 1.0


def test_max_element():
    assert max_element([3, 1, 4, 1, 5, 9, 2, 6]) == 9


def test_max_element_empty():
    with pytest.raises(EmptyInputError):
        max_element([])


def test_max_element_empty_is_value_error():
    with pytest.raises(ValueError):
        max_element([], dtype=float)


def test_max_element_keeps_first_of_ties():
    class Keyed:
        def __init__(self, key, payload):
            self.key, self.payload = key, payload

        def __lt__(self, other):
            return self.key < other.key

        def __gt__(self, other):
            return self.key > other.key

    keyed = [Keyed(1, 'a'), Keyed(1, 'b'), Keyed(0, 'c')]
    assert max_element(keyed) is keyed[0]


@pytest.mark.parametrize('dtype,zero', [(None, 0), (int, 0), (float, 0.0),
                                        (Vector3D, Vector3D())])
def test_sum_empty_returns_zero(dtype, zero):
    result = sum([], dtype=dtype)
    assert result == zero
    assert type(result) is type(zero)


@pytest.mark.parametrize('dtype,zero', [(None, 0.0), (int, 0.0),
                                        (float, 0.0),
                                        (Vector3D, Vector3D())])
def test_mean_empty_returns_zero(dtype, zero):
    result = mean([], dtype=dtype)
    assert result == zero
    assert type(result) is type(zero)


def test_variance_empty_returns_zero():
    result = variance([])
    assert result == 0.0
    assert type(result) is float


def test_transform_reduce():
    assert transform_reduce([1, 2, 3, 4], lambda x: x * 2) == 20


def test_transform_reduce_changes_type():
    result = transform_reduce([1, 2, 3], lambda x: x / 2)
    assert result == 3.0
    assert type(result) is float


def test_transform_reduce_empty():
    assert transform_reduce([], lambda x: x * 2) == 0
    result = transform_reduce([], lambda x: x * 2, result_type=float)
    assert result == 0.0
    assert type(result) is float


def test_transform_reduce_mixed_results():
    with pytest.raises(CapabilityError):
        transform_reduce([1, 2], lambda x: x if x == 1 else float(x))


def test_transform_reduce_mapped_type_not_addable(only_order):
    with pytest.raises(CapabilityError):
        transform_reduce([1, 2], only_order)


def test_transform_reduce_checks_before_mapping_rest(only_order):
    calls = []

    def to_order(x):
        calls.append(x)
        return only_order(x)

    with pytest.raises(CapabilityError):
        transform_reduce([1, 2, 3, 4, 5], to_order)
    assert calls == [1]


def test_transform_reduce_result_type_accepts_subclasses():
    result = transform_reduce([1, 2], lambda x: x == 1, result_type=int)
    assert result == 1


def test_transform_reduce_empty_rejects_result_type(only_order):
    with pytest.raises(CapabilityError):
        transform_reduce([], lambda x: x, result_type=only_order)


def test_vector_sum(unit_vectors):
    assert sum(unit_vectors) == Vector3D(1, 1, 1)


def test_vector_mean(unit_vectors):
    result = mean(unit_vectors)
    assert result == Vector3D(1 / 3, 1 / 3, 1 / 3)
    assert type(result) is Vector3D


def test_vector_mean_leaves_inputs_unchanged(unit_vectors):
    mean(unit_vectors)
    variance(unit_vectors)
    assert unit_vectors == [
        Vector3D(1, 0, 0), Vector3D(0, 1, 0), Vector3D(0, 0, 1)
    ]


def test_vector_variance(unit_vectors):
    result = variance(unit_vectors)
    expected = (1 / 3) * (2 / 3)
    assert result.x == pytest.approx(expected)
    assert result.y == pytest.approx(expected)
    assert result.z == pytest.approx(expected)


def test_vector_max_first_of_equal_magnitude(unit_vectors):
    assert max_element(unit_vectors) is unit_vectors[0]


def test_vector_max_by_magnitude():
    vals = [Vector3D(1, 0, 0), Vector3D(0, -3, 0), Vector3D(1, 1, 1)]
    assert max_element(vals) is vals[1]


def test_ndarray_int():
    vals = np.array([1, 2, 3, 4], dtype=np.int64)
    assert sum(vals) == 10
    assert type(sum(vals)) is np.int64
    result = mean(vals)
    assert result == 2.5
    assert type(result) is np.float64
    assert variance(vals) == 1.25
    assert max_element(vals) == 4


def test_ndarray_empty():
    result = mean(np.array([], dtype=np.int32))
    assert result == 0.0
    assert type(result) is np.float64


def test_sum_rejects_opaque(opaque):
    with pytest.raises(CapabilityError):
        sum([opaque(), opaque()])


def test_sum_and_mean_reject_order_only(only_order):
    vals = [only_order(1), only_order(2)]
    with pytest.raises(CapabilityError):
        sum(vals)
    with pytest.raises(CapabilityError):
        mean(vals)


def test_max_rejects_add_only(only_add):
    with pytest.raises(CapabilityError):
        max_element([only_add(1), only_add(2)])


def test_max_rejects_add_only_when_empty(only_add):
    # The capability check runs before the empty-input check.
    with pytest.raises(CapabilityError):
        max_element([], dtype=only_add)


def test_mean_rejects_bools():
    with pytest.raises(CapabilityError):
        mean([True, False])


def test_mean_rejects_strings():
    # Strings concatenate but cannot be divided by a count.
    assert sum(['a', 'b']) == 'ab'
    with pytest.raises(CapabilityError):
        mean(['a', 'b'])


def test_variance_rejects_strings():
    with pytest.raises(CapabilityError, match='Numeric'):
        variance(['a', 'b'])


def test_rejects_mixed_elements():
    with pytest.raises(CapabilityError):
        sum([1, 2.0])


def test_rejects_unsized_input():
    with pytest.raises(CapabilityError):
        sum(x for x in [1, 2])
