"""Keccak-f[1600] permutation and a byte-oriented sponge built on it."""

from __future__ import annotations

from typing import Sequence

_MASK64 = (1 << 64) - 1
_LANES = 25
_STATE_BYTES = 8 * _LANES
_ROUNDS = 24

# Rotation offsets indexed by lane position x + 5 * y.
_RHO = (
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
)


def _lfsr_bit(t: int) -> int:
    """Output bit of the round-constant LFSR x^8 + x^6 + x^5 + x^4 + 1."""
    t %= 255
    reg = 1
    for _ in range(t):
        reg <<= 1
        if reg & 0x100:
            reg ^= 0x171
    return reg & 1


def _round_constants() -> tuple[int, ...]:
    constants = []
    for rnd in range(_ROUNDS):
        value = 0
        for j in range(7):
            if _lfsr_bit(j + 7 * rnd):
                value |= 1 << ((1 << j) - 1)
        constants.append(value)
    return tuple(constants)


_ROUND_CONSTANTS = _round_constants()


def _rol(value: int, shift: int) -> int:
    if shift == 0:
        return value
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def keccak_f1600(state: Sequence[int]) -> list[int]:
    """Apply the 24-round Keccak-f[1600] permutation to 25 64-bit lanes.

    Returns a new list; the input is left untouched.
    """
    lanes = list(state)
    if len(lanes) != _LANES:
        raise ValueError(f"Keccak state must hold {_LANES} lanes, got {len(lanes)}")
    if any(not 0 <= lane <= _MASK64 for lane in lanes):
        raise ValueError("Keccak lanes must be unsigned 64-bit integers")

    for rc in _ROUND_CONSTANTS:
        # theta
        columns = [
            lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20]
            for x in range(5)
        ]
        deltas = [columns[(x - 1) % 5] ^ _rol(columns[(x + 1) % 5], 1) for x in range(5)]
        lanes = [lane ^ deltas[i % 5] for i, lane in enumerate(lanes)]

        # rho and pi
        moved = [0] * _LANES
        for i, lane in enumerate(lanes):
            x, y = i % 5, i // 5
            moved[y + 5 * ((2 * x + 3 * y) % 5)] = _rol(lane, _RHO[i])

        # chi
        lanes = [
            moved[i] ^ (~moved[(i % 5 + 1) % 5 + 5 * (i // 5)] & moved[(i % 5 + 2) % 5 + 5 * (i // 5)])
            for i in range(_LANES)
        ]
        lanes = [lane & _MASK64 for lane in lanes]

        # iota
        lanes[0] ^= rc
    return lanes


class KeccakSponge:
    """Incremental Keccak sponge with a given rate (bytes) and domain byte.

    Data is absorbed with :meth:`absorb`, padded by :meth:`finalize`, and
    output is read with :meth:`squeeze` (byte granular) or
    :meth:`squeeze_blocks` (whole rate-sized blocks).
    """

    def __init__(self, rate: int, domain: int) -> None:
        if not 0 < rate < _STATE_BYTES or rate % 8:
            raise ValueError(f"rate must be a multiple of 8 between 8 and {_STATE_BYTES - 8}, got {rate}")
        if not 0 <= domain <= 0xFF:
            raise ValueError(f"domain byte must be in 0..255, got {domain}")
        self.rate = rate
        self.domain = domain
        self._lanes = [0] * _LANES
        self._pending = bytearray()
        self._output = b""
        self._finalized = False

    @property
    def finalized(self) -> bool:
        """Whether the absorb phase has been closed."""
        return self._finalized

    def _xor_block(self, block: bytes) -> None:
        for i in range(len(block) // 8):
            self._lanes[i] ^= int.from_bytes(block[8 * i: 8 * i + 8], "little")

    def _permute(self) -> None:
        self._lanes = keccak_f1600(self._lanes)

    def _rate_bytes(self) -> bytes:
        return b"".join(lane.to_bytes(8, "little") for lane in self._lanes[: self.rate // 8])

    def absorb(self, data: bytes) -> None:
        """Absorb more input; may be called any number of times before finalizing."""
        if self._finalized:
            raise RuntimeError("cannot absorb after the sponge has been finalized")
        self._pending += data
        while len(self._pending) >= self.rate:
            self._xor_block(bytes(self._pending[: self.rate]))
            del self._pending[: self.rate]
            self._permute()

    def finalize(self) -> None:
        """Apply domain separation and padding, ending the absorb phase."""
        if self._finalized:
            raise RuntimeError("sponge has already been finalized")
        block = bytearray(self.rate)
        block[: len(self._pending)] = self._pending
        block[len(self._pending)] ^= self.domain
        block[self.rate - 1] ^= 0x80
        self._xor_block(bytes(block))
        self._pending.clear()
        self._output = b""
        self._finalized = True

    def squeeze(self, length: int) -> bytes:
        """Return the next ``length`` output bytes, finalizing first if needed."""
        if length < 0:
            raise ValueError("length must be non-negative")
        if not self._finalized:
            self.finalize()
        parts = []
        taken = self._output[:length]
        self._output = self._output[len(taken):]
        parts.append(taken)
        remaining = length - len(taken)
        while remaining > 0:
            self._permute()
            block = self._rate_bytes()
            parts.append(block[:remaining])
            self._output = block[remaining:]
            remaining -= min(remaining, self.rate)
        return b"".join(parts)

    def squeeze_blocks(self, nblocks: int) -> bytes:
        """Return ``nblocks`` full rate-sized blocks, each after a fresh permutation.

        Any bytes left over from a previous :meth:`squeeze` are discarded.
        """
        if nblocks < 0:
            raise ValueError("nblocks must be non-negative")
        if not self._finalized:
            self.finalize()
        self._output = b""
        blocks = []
        for _ in range(nblocks):
            self._permute()
            blocks.append(self._rate_bytes())
        return b"".join(blocks)

    def copy(self) -> "KeccakSponge":
        """Return an independent sponge in the same state."""
        clone = KeccakSponge(self.rate, self.domain)
        clone._lanes = list(self._lanes)
        clone._pending = bytearray(self._pending)
        clone._output = self._output
        clone._finalized = self._finalized
        return clone