"""Products of sparse and dense binary polynomials modulo X^n - 1."""

from __future__ import annotations

from typing import Iterable, Sequence

_WORD_BITS = 64
_MASK64 = (1 << _WORD_BITS) - 1


def mul_low_weight(light_positions: Iterable[int], heavy: Sequence[int], n: int) -> list[int]:
    """Multiply a low-weight polynomial by a dense one modulo X^n - 1.

    ``light_positions`` lists the exponents of the set coefficients of the sparse
    factor. Processing stops at the first position greater than ``n``. The
    position ``n`` itself counts as X^0. ``heavy`` is the dense factor as
    little-endian 64-bit words covering ``n`` bits. The product is returned in
    that same form.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    nwords = -(-n // _WORD_BITS)
    words = list(heavy)
    if len(words) != nwords:
        raise ValueError(f"dense operand must have {nwords} words, got {len(words)}")
    if any(not 0 <= word <= _MASK64 for word in words):
        raise ValueError("words must be unsigned 64-bit integers")

    dense = 0
    for i, word in enumerate(words):
        dense |= word << (_WORD_BITS * i)
    if dense >> n:
        raise ValueError(f"dense operand has bits beyond degree {n - 1}")

    mask = (1 << n) - 1
    product = 0
    for position in light_positions:
        if position < 0:
            raise ValueError("positions must be non-negative")
        if position > n:
            break
        shift = position % n
        product ^= ((dense << shift) | (dense >> (n - shift))) & mask

    return [(product >> (_WORD_BITS * i)) & _MASK64 for i in range(nwords)]