"""Additive FFT over GF(2^8) for evaluating error locator polynomials.

This follows the Gao–Mateer additive FFT, with the radix conversion of
Bernstein, Chou and Schwabe. Polynomials have at most ``2 ** PARAM_FFT``
coefficients. They are evaluated at every element of the field.
"""

from __future__ import annotations

from typing import Sequence

from hqcprim.gf import GF_LOG, GF_MUL_ORDER, PARAM_M, gf_inverse, gf_mul, gf_square

PARAM_FFT = 4
FFT_COEFFS = 1 << PARAM_FFT
FIELD_SIZE = 1 << PARAM_M


def _fft_betas() -> list[int]:
    """Basis of betas (omitting 1) used by the FFT and its inverse mapping."""
    return [1 << (PARAM_M - 1 - i) for i in range(PARAM_M - 1)]


def _subset_sums(items: Sequence[int]) -> list[int]:
    """Return the sums of all subsets; entry ``i`` sums the items selected by the bits of ``i``."""
    sums = [0]
    for item in items:
        sums += [item ^ s for s in sums]
    return sums


def _radix_big(f: list[int], m_f: int) -> tuple[list[int], list[int]]:
    n = 1 << (m_f - 2)
    high = f[3 * n: 4 * n]
    q = high + high
    r = f[: 2 * n]
    for i in range(n):
        q[i] ^= f[2 * n + i]
        r[n + i] ^= q[i]
    q0, q1 = _radix(q, m_f - 1)
    r0, r1 = _radix(r, m_f - 1)
    return r0[:n] + q0[:n], r1[:n] + q1[:n]


def _radix(f: list[int], m_f: int) -> tuple[list[int], list[int]]:
    """Split f into f0, f1 with f(x) = f0(x^2 - x) + x * f1(x^2 - x).

    ``f`` holds ``2 ** m_f`` coefficients; each half holds ``2 ** (m_f - 1)``.
    """
    half = 1 << (m_f - 1)
    f0 = [0] * half
    f1 = [0] * half
    if m_f == 4:
        f0[4] = f[8] ^ f[12]
        f0[6] = f[12] ^ f[14]
        f0[7] = f[14] ^ f[15]
        f1[5] = f[11] ^ f[13]
        f1[6] = f[13] ^ f[14]
        f1[7] = f[15]
        f0[5] = f[10] ^ f[12] ^ f1[5]
        f1[4] = f[9] ^ f[13] ^ f0[5]

        f0[0] = f[0]
        f1[3] = f[7] ^ f[11] ^ f[15]
        f0[3] = f[6] ^ f[10] ^ f[14] ^ f1[3]
        f0[2] = f[4] ^ f0[4] ^ f0[3] ^ f1[3]
        f1[1] = f[3] ^ f[5] ^ f[9] ^ f[13] ^ f1[3]
        f1[2] = f[3] ^ f1[1] ^ f0[3]
        f0[1] = f[2] ^ f0[2] ^ f1[1]
        f1[0] = f[1] ^ f0[1]
    elif m_f == 3:
        f0[0] = f[0]
        f0[2] = f[4] ^ f[6]
        f0[3] = f[6] ^ f[7]
        f1[1] = f[3] ^ f[5] ^ f[7]
        f1[2] = f[5] ^ f[6]
        f1[3] = f[7]
        f0[1] = f[2] ^ f0[2] ^ f1[1]
        f1[0] = f[1] ^ f0[1]
    elif m_f == 2:
        f0[0] = f[0]
        f0[1] = f[2] ^ f[3]
        f1[0] = f[1] ^ f0[1]
        f1[1] = f[3]
    elif m_f == 1:
        f0[0] = f[0]
        f1[0] = f[1]
    else:
        return _radix_big(f, m_f)
    return f0, f1


def _fft_rec(f: list[int], f_coeffs: int, m: int, m_f: int, betas: Sequence[int]) -> list[int]:
    """Evaluate f at all subset sums of the first ``m`` betas."""
    f = list(f[: 1 << m_f]) + [0] * max(0, (1 << m_f) - len(f))

    # Step 1: f is linear
    if m_f == 1:
        w = [f[0]]
        for beta in betas[:m]:
            t = gf_mul(beta, f[1])
            w += [x ^ t for x in w]
        return w

    # Step 2: twist f by beta_m
    beta_m = betas[m - 1]
    if beta_m != 1:
        power = 1
        for i in range(1, 1 << m_f):
            power = gf_mul(power, beta_m)
            f[i] = gf_mul(power, f[i])

    # Step 3
    f0, f1 = _radix(f, m_f)

    # Step 4: gammas and deltas
    beta_m_inv = gf_inverse(beta_m)
    gammas = [gf_mul(betas[i], beta_m_inv) for i in range(m - 1)]
    deltas = [gf_square(g) ^ g for g in gammas]
    gammas_sums = _subset_sums(gammas)

    # Step 5
    u = _fft_rec(f0, (f_coeffs + 1) // 2, m - 1, m_f - 1, deltas)

    k = 1 << (m - 1)
    w = [0] * (2 * k)
    if f_coeffs <= 3:
        # f1 is constant
        c = f1[0]
        w[0] = u[0]
        w[k] = u[0] ^ c
        for i in range(1, k):
            w[i] = u[i] ^ gf_mul(gammas_sums[i], c)
            w[k + i] = w[i] ^ c
    else:
        v = _fft_rec(f1, f_coeffs // 2, m - 1, m_f - 1, deltas)
        # Step 6
        w[k:] = v[:k]
        w[0] = u[0]
        w[k] ^= u[0]
        for i in range(1, k):
            w[i] = u[i] ^ gf_mul(gammas_sums[i], v[i])
            w[k + i] ^= w[i]
    return w


def fft(f: Sequence[int], f_coeffs: int) -> list[int]:
    """Evaluate the polynomial ``f`` at every element of GF(2^8).

    ``f`` lists at most ``2 ** PARAM_FFT`` coefficients, lowest degree first.
    ``f_coeffs`` is its number of coefficients, that is, its degree plus one.
    Entry ``i < 128`` of the result is f at the ``i``-th subset sum of the betas.
    Entry ``128 + i`` is f at that sum plus 1.
    """
    coeffs = list(f)
    if len(coeffs) > FFT_COEFFS:
        raise ValueError(f"polynomial may have at most {FFT_COEFFS} coefficients, got {len(coeffs)}")
    if any(not 0 <= c < FIELD_SIZE for c in coeffs):
        raise ValueError("coefficients must be field elements in 0..255")
    if not 0 <= f_coeffs <= FFT_COEFFS:
        raise ValueError(f"f_coeffs must be in 0..{FFT_COEFFS}, got {f_coeffs}")
    coeffs += [0] * (FFT_COEFFS - len(coeffs))

    betas = _fft_betas()
    betas_sums = _subset_sums(betas)

    # Step 2 is skipped here because beta_m is 1. Step 3 follows.
    f0, f1 = _radix(coeffs, PARAM_FFT)

    # Step 4
    deltas = [gf_square(b) ^ b for b in betas]

    # Step 5
    u = _fft_rec(f0, (f_coeffs + 1) // 2, PARAM_M - 1, PARAM_FFT - 1, deltas)
    v = _fft_rec(f1, f_coeffs // 2, PARAM_M - 1, PARAM_FFT - 1, deltas)

    k = 1 << (PARAM_M - 1)
    w = [0] * (2 * k)
    w[k:] = v[:k]
    w[0] = u[0]
    w[k] ^= u[0]
    for i in range(1, k):
        w[i] = u[i] ^ gf_mul(betas_sums[i], v[i])
        w[k + i] ^= w[i]
    return w


def retrieve_error_poly(w: Sequence[int]) -> list[int]:
    """Turn the ELP evaluations ``w`` from :func:`fft` into an error vector.

    Returns 256 entries. Entry ``j`` is 1 exactly when alpha^(-j) is a root.
    Both the evaluation at 0 and the evaluation at 1 toggle entry 0.
    """
    values = list(w)
    if len(values) != FIELD_SIZE:
        raise ValueError(f"expected {FIELD_SIZE} evaluations, got {len(values)}")

    gammas_sums = _subset_sums(_fft_betas())
    k = 1 << (PARAM_M - 1)
    error = [0] * FIELD_SIZE

    error[0] ^= int(values[0] == 0)
    error[0] ^= int(values[k] == 0)
    for i in range(1, k):
        index = GF_MUL_ORDER - GF_LOG[gammas_sums[i]]
        error[index] ^= int(values[i] == 0)
        index = GF_MUL_ORDER - GF_LOG[gammas_sums[i] ^ 1]
        error[index] ^= int(values[k + i] == 0)
    return error