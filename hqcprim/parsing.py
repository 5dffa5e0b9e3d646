"""Conversion between byte strings and little-endian 64-bit word arrays."""

from __future__ import annotations

from typing import Sequence

_WORD_BYTES = 8
_MASK64 = (1 << 64) - 1


def load8_arr(data: bytes, outlen: int) -> list[int]:
    """Read ``outlen`` little-endian 64-bit words from ``data``.

    A short final chunk fills the low bytes of its word; words past the end
    of ``data`` are zero and bytes beyond ``outlen`` words are ignored.
    """
    if outlen < 0:
        raise ValueError("outlen must be non-negative")
    data = bytes(data)
    return [
        int.from_bytes(data[_WORD_BYTES * i: _WORD_BYTES * (i + 1)], "little")
        for i in range(outlen)
    ]


def store8_arr(words: Sequence[int], outlen: int) -> bytes:
    """Write 64-bit words little-endian into exactly ``outlen`` bytes.

    Output is truncated to ``outlen`` bytes, or zero-padded when the words
    do not fill it.
    """
    if outlen < 0:
        raise ValueError("outlen must be non-negative")
    if any(not 0 <= word <= _MASK64 for word in words):
        raise ValueError("words must be unsigned 64-bit integers")
    packed = b"".join(word.to_bytes(_WORD_BYTES, "little") for word in words)
    return packed[:outlen].ljust(outlen, b"\x00")