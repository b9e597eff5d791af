"""Bit manipulation helpers and binary/decimal digit conversions."""

from __future__ import annotations


def is_odd(n: int) -> bool:
    """Tell whether ``n`` is odd."""
    return bool(n & 1)


def get_bit(n: int, i: int) -> int:
    """Return bit ``i`` of ``n`` as 0 or 1."""
    return (n >> i) & 1


def set_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` set."""
    return n | (1 << i)


def clear_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` cleared."""
    return n & ~(1 << i)


def update_bit(n: int, i: int, bit: int) -> int:
    """Return ``n`` with bit ``i`` set to ``bit`` (any truthy value means 1)."""
    cleared = clear_bit(n, i)
    return set_bit(cleared, i) if bit else cleared


def clear_low_bits(n: int, i: int) -> int:
    """Return ``n`` with its lowest ``i`` bits cleared."""
    return n & (~0 << i)


def replace_bits(n: int, i: int, j: int, bits: int) -> int:
    """Return ``n`` with bits ``i`` to ``j`` (inclusive) replaced by ``bits``."""
    high_mask = ~0 << (j + 1)
    low_mask = ~(~0 << i)
    return n & (high_mask | low_mask) | (bits << i)


def two_to_power(n: int) -> int:
    """Return 2 to the power ``n``."""
    return 1 << n


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("value must not be negative")


def count_bits(n: int) -> int:
    """Count set bits by shifting through every bit."""
    _require_non_negative(n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def fast_count_bits(n: int) -> int:
    """Count set bits by clearing the lowest set bit each step."""
    _require_non_negative(n)
    count = 0
    while n:
        count += 1
        n &= n - 1
    return count


def fast_power(base: int, exp: int) -> int:
    """Raise ``base`` to ``exp`` by recursive squaring."""
    _require_non_negative(exp)
    if exp == 0:
        return 1
    half = fast_power(base, exp >> 1)
    square = half * half
    return base * square if exp & 1 else square


def fast_power_iterative(base: int, exp: int) -> int:
    """Raise ``base`` to ``exp`` by iterative squaring over the bits of ``exp``."""
    _require_non_negative(exp)
    result = 1
    while exp:
        if exp & 1:
            result *= base
        base *= base
        exp >>= 1
    return result


def convert_base(n: int, from_base: int, to_base: int) -> int:
    """Peel digits of ``n`` in ``to_base`` and weigh them by powers of ``from_base``.

    ``convert_base(n, 10, 2)`` writes ``n`` as binary digits in a decimal number;
    ``convert_base(n, 2, 10)`` reads such a number back. Negative numbers keep
    their sign.
    """
    if from_base < 2 or to_base < 2:
        raise ValueError("bases must be at least 2")
    if n < 0:
        return -convert_base(-n, from_base, to_base)
    weight = 1
    result = 0
    while n:
        n, digit = divmod(n, to_base)
        result += digit * weight
        weight *= from_base
    return result


def decimal_to_binary(n: int) -> int:
    """Return the binary digits of ``n`` written as a decimal number (5 -> 101)."""
    return convert_base(n, 10, 2)


def binary_to_decimal(n: int) -> int:
    """Read a decimal number made of binary digits back into its value (101 -> 5)."""
    return convert_base(n, 2, 10)


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` has at most one set bit; 0 counts as a power of two."""
    return not n & (n - 1)


def earth_level(n: int) -> int:
    """Return the number of steps to reach 0 by clearing the lowest set bit."""
    return fast_count_bits(n)