"""SHA-3 hash functions and SHAKE extendable-output functions (FIPS 202)."""

from __future__ import annotations

from typing import ClassVar, TypeVar

from hqcprim.keccak import KeccakSponge

SHAKE128_RATE = 168
SHAKE256_RATE = 136
SHA3_256_RATE = 136
SHA3_384_RATE = 104
SHA3_512_RATE = 72

_SHAKE_DOMAIN = 0x1F
_SHA3_DOMAIN = 0x06

_ShakeT = TypeVar("_ShakeT", bound="_Shake")
_Sha3T = TypeVar("_Sha3T", bound="_Sha3")


class _Shake:
    """Common behaviour of the SHAKE extendable-output functions."""

    rate: ClassVar[int]

    def __init__(self, data: bytes = b"") -> None:
        self._sponge = KeccakSponge(self.rate, _SHAKE_DOMAIN)
        if data:
            self._sponge.absorb(bytes(data))

    def update(self, data: bytes) -> None:
        """Absorb more input. Not allowed once output has been squeezed."""
        if self._sponge.finalized:
            raise RuntimeError("cannot update after output has been squeezed")
        self._sponge.absorb(bytes(data))

    def squeeze(self, length: int) -> bytes:
        """Return the next ``length`` bytes of output; may be called repeatedly."""
        return self._sponge.squeeze(length)

    def copy(self: _ShakeT) -> _ShakeT:
        """Return an independent copy of the current state."""
        clone = type(self).__new__(type(self))
        clone._sponge = self._sponge.copy()
        return clone


class _Sha3:
    """Common behaviour of the fixed-length SHA-3 hash functions."""

    rate: ClassVar[int]
    digest_size: ClassVar[int]

    def __init__(self, data: bytes = b"") -> None:
        self._sponge = KeccakSponge(self.rate, _SHA3_DOMAIN)
        if data:
            self._sponge.absorb(bytes(data))

    def update(self, data: bytes) -> None:
        """Absorb more input."""
        self._sponge.absorb(bytes(data))

    def digest(self) -> bytes:
        """Return the digest of everything absorbed so far; the state is kept."""
        sponge = self._sponge.copy()
        return sponge.squeeze_blocks(1)[: self.digest_size]

    def hexdigest(self) -> str:
        """Return the digest as a lowercase hexadecimal string."""
        return self.digest().hex()

    def copy(self: _Sha3T) -> _Sha3T:
        """Return an independent copy of the current state."""
        clone = type(self).__new__(type(self))
        clone._sponge = self._sponge.copy()
        return clone


class Shake128(_Shake):
    """Incremental SHAKE128."""

    rate = SHAKE128_RATE

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    def update(self, data: bytes) -> None:
        """Absorb more input. Not allowed once output has been squeezed."""
        super().update(data)

    def squeeze(self, length: int) -> bytes:
        """Return the next ``length`` bytes of output."""
        return super().squeeze(length)

    def copy(self) -> Shake128:
        """Return an independent copy of the current state."""
        return super().copy()


class Shake256(_Shake):
    """Incremental SHAKE256."""

    rate = SHAKE256_RATE

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    def update(self, data: bytes) -> None:
        """Absorb more input. Not allowed once output has been squeezed."""
        super().update(data)

    def squeeze(self, length: int) -> bytes:
        """Return the next ``length`` bytes of output."""
        return super().squeeze(length)

    def copy(self) -> Shake256:
        """Return an independent copy of the current state."""
        return super().copy()


class Sha3_256(_Sha3):
    """Incremental SHA3-256."""

    rate = SHA3_256_RATE
    digest_size = 32

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    def update(self, data: bytes) -> None:
        """Absorb more input."""
        super().update(data)

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything absorbed so far."""
        return super().digest()

    def copy(self) -> Sha3_256:
        """Return an independent copy of the current state."""
        return super().copy()


class Sha3_384(_Sha3):
    """Incremental SHA3-384."""

    rate = SHA3_384_RATE
    digest_size = 48

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    def update(self, data: bytes) -> None:
        """Absorb more input."""
        super().update(data)

    def digest(self) -> bytes:
        """Return the 48-byte digest of everything absorbed so far."""
        return super().digest()

    def copy(self) -> Sha3_384:
        """Return an independent copy of the current state."""
        return super().copy()


class Sha3_512(_Sha3):
    """Incremental SHA3-512."""

    rate = SHA3_512_RATE
    digest_size = 64

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)

    def update(self, data: bytes) -> None:
        """Absorb more input."""
        super().update(data)

    def digest(self) -> bytes:
        """Return the 64-byte digest of everything absorbed so far."""
        return super().digest()

    def copy(self) -> Sha3_512:
        """Return an independent copy of the current state."""
        return super().copy()


def shake128(data: bytes, outlen: int) -> bytes:
    """Return ``outlen`` bytes of SHAKE128 output for ``data``."""
    return Shake128(data).squeeze(outlen)


def shake256(data: bytes, outlen: int) -> bytes:
    """Return ``outlen`` bytes of SHAKE256 output for ``data``."""
    return Shake256(data).squeeze(outlen)


def sha3_256(data: bytes) -> bytes:
    """Return the SHA3-256 digest of ``data``."""
    return Sha3_256(data).digest()


def sha3_384(data: bytes) -> bytes:
    """Return the SHA3-384 digest of ``data``."""
    return Sha3_384(data).digest()


def sha3_512(data: bytes) -> bytes:
    """Return the SHA3-512 digest of ``data``."""
    return Sha3_512(data).digest()