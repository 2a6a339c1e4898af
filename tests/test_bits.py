from functools import reduce
from operator import xor

import pytest

from algocraft.bits import (
    bitwise_and,
    bitwise_or,
    bitwise_xor,
    complement,
    count_set_bits,
    largest_power,
    shift_left,
    shift_right,
    to_signed,
    xor_upto,
)


def test_and_values():
    assert bitwise_and(15, 13) == 13
    assert bitwise_and(-1, -2) == -2


def test_or_values():
    assert bitwise_or(15, 13) == 15
    assert bitwise_or(-1, -2) == -1


def test_xor_values():
    assert bitwise_xor(15, 13) == 2
    assert bitwise_xor(-1, -2) == 1


def test_complement_values():
    assert complement(15) == -16
    assert complement(-1) == 0


def test_results_wrap_to_32_bits():
    assert bitwise_or(2**31, 0) == -(2**31)
    assert complement(2**31 - 1) == -(2**31)


def test_unsigned_short_shifts():
    assert shift_right(15, 1, 16, False) == 7
    assert shift_left(15, 1, 16, False) == 30
    assert shift_left(-1, 0, 16, False) == 65535
    assert shift_right(-1, 1, 16, False) == 32767
    assert shift_left(-1, 1, 16, False) == 65534


def test_signed_short_shifts():
    assert shift_right(15, 1) == 7
    assert shift_left(15, 1) == 30
    assert shift_right(-1, 1) == -1
    assert shift_left(-1, 1) == -2


def test_negative_shift_raises():
    with pytest.raises(ValueError):
        shift_left(1, -1)
    with pytest.raises(ValueError):
        shift_right(1, -1)


@pytest.mark.parametrize("value", [0, 1, -1, 32767, -32768, 12345, -54321])
def test_to_signed_round_trip(value):
    width = 32
    assert to_signed(value & 0xFFFFFFFF, width) == value


def test_to_signed_rejects_zero_width():
    with pytest.raises(ValueError):
        to_signed(1, 0)


@pytest.mark.parametrize("n", range(0, 40))
def test_xor_upto_matches_fold(n):
    assert xor_upto(n) == reduce(xor, range(1, n + 1), 0)


@pytest.mark.parametrize("n", [1, 2, 3, 7, 8, 9, 1023, 1024])
def test_largest_power_bounds(n):
    x = largest_power(n)
    assert 2**x <= n < 2 ** (x + 1)


def test_largest_power_below_one():
    assert largest_power(0) == -1


@pytest.mark.parametrize("n", list(range(0, 70)) + [1000, 4096, 9999])
def test_count_set_bits_matches_counting(n):
    assert count_set_bits(n) == sum(bin(k).count("1") for k in range(1, n + 1))


def test_negative_inputs_raise():
    with pytest.raises(ValueError):
        count_set_bits(-1)
    with pytest.raises(ValueError):
        xor_upto(-1)