"""HQC primitives: Keccak and SHA-3/SHAKE, GF(2^8) arithmetic, additive FFT, sparse polynomial products and word packing."""

__version__ = "0.1.0"
__all__ = ["keccak", "sha3", "gf", "parsing", "fft", "gf2x"]