"""Fixed-width bitwise operations and bit-counting formulas."""

from __future__ import annotations

INT_WIDTH = 32
SHORT_WIDTH = 16


def to_signed(value: int, width: int) -> int:
    """Read the low width bits of value as a two's-complement number."""
    if width < 1:
        raise ValueError("width must be positive")
    bits = value & ((1 << width) - 1)
    return bits - (1 << width) if bits >> (width - 1) else bits


def bitwise_and(a: int, b: int) -> int:
    """Return a & b as a 32-bit signed integer."""
    return to_signed(a & b, INT_WIDTH)


def bitwise_or(a: int, b: int) -> int:
    """Return a | b as a 32-bit signed integer."""
    return to_signed(a | b, INT_WIDTH)


def bitwise_xor(a: int, b: int) -> int:
    """Return a ^ b as a 32-bit signed integer."""
    return to_signed(a ^ b, INT_WIDTH)


def complement(value: int) -> int:
    """Return the one's complement of value as a 32-bit signed integer."""
    return to_signed(~value, INT_WIDTH)


def shift_left(value: int, bits: int, width: int = SHORT_WIDTH, signed: bool = True) -> int:
    """Shift a width-bit value left, dropping bits that leave the width."""
    if bits < 0:
        raise ValueError("shift must not be negative")
    mask = (1 << width) - 1
    shifted = ((value & mask) << bits) & mask
    return to_signed(shifted, width) if signed else shifted


def shift_right(value: int, bits: int, width: int = SHORT_WIDTH, signed: bool = True) -> int:
    """Shift a width-bit value right: arithmetically if signed, logically otherwise."""
    if bits < 0:
        raise ValueError("shift must not be negative")
    if signed:
        return to_signed(value, width) >> bits
    return (value & ((1 << width) - 1)) >> bits


def xor_upto(n: int) -> int:
    """Return 1 ^ 2 ^ ... ^ n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return (n, 1, n + 1, 0)[n % 4]


def largest_power(n: int) -> int:
    """Return the largest x with 2**x <= n, or -1 if n < 1."""
    return n.bit_length() - 1 if n >= 1 else -1


def count_set_bits(n: int) -> int:
    """Return the total number of set bits in the integers 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = 0
    while n > 1:
        power = largest_power(n)
        total += power * (1 << (power - 1)) + n - (1 << power) + 1
        n -= 1 << power
    return total + n