import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hqcprim.sha3 import (
    Sha3_256,
    Sha3_384,
    Sha3_512,
    Shake128,
    Shake256,
    sha3_256,
    sha3_384,
    sha3_512,
    shake128,
    shake256,
)

BOUNDARY_LENGTHS = [0, 1, 71, 72, 73, 103, 104, 105, 135, 136, 137, 167, 168, 169, 300]
OUTPUT_LENGTHS = [0, 1, 135, 136, 137, 168, 169, 400]


def _message(n):
    return bytes((7 * i + 3) % 256 for i in range(n))


def test_sha3_256_empty_known_vector():
    assert sha3_256(b"").hex() == (
        "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
    )


@pytest.mark.parametrize("length", BOUNDARY_LENGTHS)
def test_sha3_256_matches_reference(length):
    data = _message(length)
    assert sha3_256(data) == hashlib.sha3_256(data).digest()


@pytest.mark.parametrize("length", BOUNDARY_LENGTHS)
def test_sha3_384_matches_reference(length):
    data = _message(length)
    assert sha3_384(data) == hashlib.sha3_384(data).digest()


@pytest.mark.parametrize("length", BOUNDARY_LENGTHS)
def test_sha3_512_matches_reference(length):
    data = _message(length)
    assert sha3_512(data) == hashlib.sha3_512(data).digest()


def test_digest_sizes():
    assert len(sha3_256(b"abc")) == 32
    assert len(sha3_384(b"abc")) == 48
    assert len(sha3_512(b"abc")) == 64


@pytest.mark.parametrize("length", BOUNDARY_LENGTHS)
def test_shake128_matches_reference(length):
    data = _message(length)
    assert shake128(data, 200) == hashlib.shake_128(data).digest(200)


@pytest.mark.parametrize("length", BOUNDARY_LENGTHS)
def test_shake256_matches_reference(length):
    data = _message(length)
    assert shake256(data, 200) == hashlib.shake_256(data).digest(200)


@pytest.mark.parametrize("outlen", OUTPUT_LENGTHS)
def test_shake128_output_lengths(outlen):
    out = shake128(b"hqc", outlen)
    assert len(out) == outlen
    assert out == hashlib.shake_128(b"hqc").digest(outlen)


@pytest.mark.parametrize("outlen", OUTPUT_LENGTHS)
def test_shake256_output_lengths(outlen):
    out = shake256(b"hqc", outlen)
    assert len(out) == outlen
    assert out == hashlib.shake_256(b"hqc").digest(outlen)


def test_shake_prefix_property():
    assert shake128(b"prefix", 123) == shake128(b"prefix", 500)[:123]
    assert shake256(b"prefix", 123) == shake256(b"prefix", 500)[:123]


def test_shake128_incremental_squeeze_equals_one_shot():
    xof = Shake128(b"incremental")
    pieces = [xof.squeeze(n) for n in (1, 10, 150, 7, 200, 0, 32)]
    assert b"".join(pieces) == hashlib.shake_128(b"incremental").digest(400)


def test_shake256_incremental_squeeze_equals_one_shot():
    xof = Shake256(b"incremental")
    pieces = [xof.squeeze(n) for n in (1, 10, 150, 7, 200, 0, 32)]
    assert b"".join(pieces) == hashlib.shake_256(b"incremental").digest(400)


def test_shake128_update_after_squeeze_raises():
    xof = Shake128(b"data")
    xof.squeeze(16)
    with pytest.raises(RuntimeError):
        xof.update(b"more")


def test_shake256_update_after_squeeze_raises():
    xof = Shake256(b"data")
    xof.squeeze(16)
    with pytest.raises(RuntimeError):
        xof.update(b"more")


def test_shake128_negative_length_raises():
    with pytest.raises(ValueError):
        shake128(b"data", -1)


def test_shake256_negative_length_raises():
    with pytest.raises(ValueError):
        shake256(b"data", -1)


def test_shake128_copy_is_independent():
    xof = Shake128(b"shared ")
    clone = xof.copy()
    xof.update(b"left")
    clone.update(b"right")
    assert xof.squeeze(64) == shake128(b"shared left", 64)
    assert clone.squeeze(64) == shake128(b"shared right", 64)


def test_shake256_copy_is_independent():
    xof = Shake256(b"shared ")
    clone = xof.copy()
    xof.update(b"left")
    clone.update(b"right")
    assert xof.squeeze(64) == shake256(b"shared left", 64)
    assert clone.squeeze(64) == shake256(b"shared right", 64)


def test_shake_copy_mid_squeeze():
    xof = Shake128(b"stream")
    xof.squeeze(50)
    clone = xof.copy()
    assert clone.squeeze(300) == xof.squeeze(300)
    xof256 = Shake256(b"stream")
    xof256.squeeze(50)
    clone256 = xof256.copy()
    assert clone256.squeeze(300) == xof256.squeeze(300)


def test_sha3_256_digest_is_repeatable_and_allows_update():
    h = Sha3_256(b"first")
    first = h.digest()
    assert h.digest() == first
    h.update(b" second")
    assert h.digest() == sha3_256(b"first second")


def test_sha3_384_digest_is_repeatable_and_allows_update():
    h = Sha3_384(b"first")
    first = h.digest()
    assert h.digest() == first
    h.update(b" second")
    assert h.digest() == sha3_384(b"first second")


def test_sha3_512_digest_is_repeatable_and_allows_update():
    h = Sha3_512(b"first")
    first = h.digest()
    assert h.digest() == first
    h.update(b" second")
    assert h.digest() == sha3_512(b"first second")


def test_sha3_copies_are_independent():
    h256 = Sha3_256(b"base")
    c256 = h256.copy()
    c256.update(b"-extra")
    assert h256.digest() == sha3_256(b"base")
    assert c256.digest() == sha3_256(b"base-extra")

    h384 = Sha3_384(b"base")
    c384 = h384.copy()
    c384.update(b"-extra")
    assert h384.digest() == sha3_384(b"base")
    assert c384.digest() == sha3_384(b"base-extra")

    h512 = Sha3_512(b"base")
    c512 = h512.copy()
    c512.update(b"-extra")
    assert h512.digest() == sha3_512(b"base")
    assert c512.digest() == sha3_512(b"base-extra")


def test_hexdigest_matches_digest():
    assert Sha3_256(b"hex").hexdigest() == sha3_256(b"hex").hex()
    assert Sha3_384(b"hex").hexdigest() == sha3_384(b"hex").hex()
    assert Sha3_512(b"hex").hexdigest() == sha3_512(b"hex").hex()


@settings(max_examples=15, deadline=None)
@given(data=st.binary(max_size=400), cuts=st.lists(st.integers(0, 400), max_size=5))
def test_chunked_updates_match_one_shot(data, cuts):
    bounds = sorted({0, len(data), *(c for c in cuts if c <= len(data))})
    h = Sha3_256()
    xof = Shake128()
    for start, end in zip(bounds, bounds[1:]):
        h.update(data[start:end])
        xof.update(data[start:end])
    assert h.digest() == hashlib.sha3_256(data).digest()
    assert xof.squeeze(40) == hashlib.shake_128(data).digest(40)


@settings(max_examples=10, deadline=None)
@given(data=st.binary(max_size=300))
def test_random_inputs_match_reference(data):
    assert sha3_512(data) == hashlib.sha3_512(data).digest()
    assert sha3_384(data) == hashlib.sha3_384(data).digest()
    assert shake256(data, 70) == hashlib.shake_256(data).digest(70)