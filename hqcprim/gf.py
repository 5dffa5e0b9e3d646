"""Arithmetic in GF(2^8) defined by the primitive polynomial 1 + x^2 + x^3 + x^4 + x^8."""

from __future__ import annotations

PARAM_M = 8
GF_POLY = 0x11D
GF_MUL_ORDER = (1 << PARAM_M) - 1
_FIELD_MASK = (1 << PARAM_M) - 1


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    exp = []
    value = 1
    for _ in range(GF_MUL_ORDER):
        exp.append(value)
        value <<= 1
        if value & (1 << PARAM_M):
            value ^= GF_POLY
    # Three wrap-around entries keep lookups of products of logs in range.
    exp.extend(exp[:3])

    log = [0] * (1 << PARAM_M)
    for power, element in enumerate(exp[:GF_MUL_ORDER]):
        log[element] = power
    return tuple(exp), tuple(log)


GF_EXP, GF_LOG = _build_tables()
"""Powers of the primitive element alpha (258 entries) and their logarithms.

The logarithm of 0 is 0 by convention.
"""


def _reduce(x: int) -> int:
    """Reduce a polynomial over GF(2) modulo GF_POLY."""
    for bit in range(x.bit_length() - 1, PARAM_M - 1, -1):
        if x >> bit & 1:
            x ^= GF_POLY << (bit - PARAM_M)
    return x


def _carryless_mul(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        b >>= 1
    return result


def gf_mul(a: int, b: int) -> int:
    """Multiply two field elements; only the low eight bits of each operand are used."""
    return _reduce(_carryless_mul(a & _FIELD_MASK, b & _FIELD_MASK))


def gf_square(a: int) -> int:
    """Square a field element; only the low eight bits of the operand are used."""
    a &= _FIELD_MASK
    spread = 0
    for i in range(PARAM_M):
        if a >> i & 1:
            spread |= 1 << (2 * i)
    return _reduce(spread)


def gf_inverse(a: int) -> int:
    """Return the multiplicative inverse of ``a``, or 0 when ``a`` is 0.

    Computes a^254 with the addition chain 1 2 3 4 7 11 15 30 60 120 127 254.
    """
    inv = gf_square(a)            # a^2
    tmp1 = gf_mul(inv, a)         # a^3
    inv = gf_square(inv)          # a^4
    tmp2 = gf_mul(inv, tmp1)      # a^7
    tmp1 = gf_mul(inv, tmp2)      # a^11
    inv = gf_mul(tmp1, inv)       # a^15
    inv = gf_square(inv)          # a^30
    inv = gf_square(inv)          # a^60
    inv = gf_square(inv)          # a^120
    inv = gf_mul(inv, tmp2)       # a^127
    return gf_square(inv)         # a^254