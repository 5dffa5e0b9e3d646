# hqcprim

Pure-Python building blocks used by the HQC code-based key encapsulation
mechanism. It needs nothing outside the standard library.

## Modules

- `hqcprim.keccak`: the Keccak-f[1600] permutation, `keccak_f1600(state)`.
  It takes 25 unsigned 64-bit lanes and returns a new list. The module also has
  `KeccakSponge(rate, domain)`, an incremental sponge with these members:
  - `absorb(data)`
  - `finalize()`, which applies the domain byte and padding
  - `squeeze(length)`, which reads output byte by byte
  - `squeeze_blocks(nblocks)`, which returns whole rate-sized blocks
  - `copy()`
  - a read-only `finalized` property

  Absorbing after finalizing raises `RuntimeError`. Squeezing finalizes
  automatically.
- `hqcprim.sha3`: the one-shot functions `shake128(data, outlen)`,
  `shake256(data, outlen)`, `sha3_256(data)`, `sha3_384(data)` and
  `sha3_512(data)`, and the incremental classes `Shake128`, `Shake256`,
  `Sha3_256`, `Sha3_384` and `Sha3_512`.
  - The SHAKE objects have `update`, `squeeze` and `copy`. `squeeze` can be
    called repeatedly and continues the same output stream. Calling `update`
    after output has been squeezed raises `RuntimeError`.
  - The SHA-3 objects have `update`, `digest`, `hexdigest` and `copy`. `digest`
    leaves the state intact, so more data can be added afterwards.
- `hqcprim.gf`: arithmetic in GF(2^8) defined by 1 + x^2 + x^3 + x^4 + x^8.
  - `gf_mul(a, b)` and `gf_square(a)` use only the low eight bits of each
    operand.
  - `gf_inverse(a)` returns 0 for 0.
  - `GF_EXP` and `GF_LOG` are the power and logarithm tables. `GF_EXP` has 258
    entries. `GF_LOG[0]` is 0.
- `hqcprim.fft`: the additive FFT.
  - `fft(f, f_coeffs)` evaluates a polynomial of at most 16 coefficients at all
    256 field elements.
  - `retrieve_error_poly(w)` turns those 256 evaluations into a 256-entry error
    vector. Entry `j` is 1 when alpha^(-j) is a root.
- `hqcprim.gf2x`: `mul_low_weight(light_positions, heavy, n)`, the product
  modulo X^n - 1 of a sparse polynomial with a dense one.
  - The sparse polynomial is given by the exponents of its set coefficients.
    Processing stops at the first position greater than `n`. Position `n`
    counts as X^0.
  - The dense polynomial and the result are little-endian lists of 64-bit words
    covering `n` bits.
- `hqcprim.parsing`: conversion between byte strings and 64-bit words.
  - `load8_arr(data, outlen)` reads `outlen` little-endian words. Missing bytes
    are read as zero.
  - `store8_arr(words, outlen)` writes exactly `outlen` bytes, truncating the
    output or padding it with zeros.

Out-of-range arguments raise `ValueError`. Examples are negative lengths,
lanes or words that do not fit in 64 bits, and coefficients outside 0..255.

## Install

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Examples

Hashing:

    from hqcprim.sha3 import sha3_256, shake256, Shake128

    digest = sha3_256(b"abc")
    stream = shake256(b"seed", 64)

    xof = Shake128(b"part one ")
    xof.update(b"part two")
    first = xof.squeeze(16)
    more = xof.squeeze(16)  # continues the same output stream

Field arithmetic:

    from hqcprim.gf import gf_mul, gf_inverse

    a = 0x53
    assert gf_mul(a, gf_inverse(a)) == 1

Sparse-by-dense product modulo X^70 - 1:

    from hqcprim.gf2x import mul_low_weight

    assert mul_low_weight([0, 1], [1, 0], 70) == [3, 0]

Word packing:

    from hqcprim.parsing import load8_arr, store8_arr

    words = load8_arr(bytes(range(12)), 2)
    assert store8_arr(words, 12) == bytes(range(12))

## What this package does not do

This package provides primitives only. It does not do the following:

- generate key pairs, or encapsulate and decapsulate shared secrets
- provide the Reed-Solomon or Reed-Muller codes that the scheme concatenates
- include a random-byte source or a seed expander
- provide a command-line tool