import pytest
from hypothesis import given, strategies as st

from hqcprim.parsing import load8_arr, store8_arr


def test_load_is_little_endian():
    assert load8_arr(bytes(range(8)), 1) == [0x0706050403020100]


def test_load_partial_last_word():
    assert load8_arr(b"\x01\x02\x03", 1) == [0x030201]


def test_load_pads_missing_words_with_zero():
    words = load8_arr(b"\xff" * 9, 3)
    assert words == [(1 << 64) - 1, 0xFF, 0]


def test_load_ignores_bytes_past_outlen():
    assert load8_arr(b"\x01" * 8 + b"\x02" * 8, 1) == load8_arr(b"\x01" * 8, 1)


def test_load_zero_words():
    assert load8_arr(b"\x01\x02", 0) == []


def test_store_truncates_to_outlen():
    assert store8_arr([0x0706050403020100], 3) == b"\x00\x01\x02"


def test_store_pads_with_zero():
    assert store8_arr([0xFF], 10) == b"\xff" + b"\x00" * 9


def test_store_empty():
    assert store8_arr([], 4) == b"\x00" * 4


@pytest.mark.parametrize("bad", [-1, 1 << 64])
def test_store_rejects_out_of_range_words(bad):
    with pytest.raises(ValueError):
        store8_arr([bad], 8)


def test_negative_lengths_rejected():
    with pytest.raises(ValueError):
        load8_arr(b"", -1)
    with pytest.raises(ValueError):
        store8_arr([], -1)


@given(st.binary(max_size=100))
def test_bytes_round_trip(data):
    nwords = (len(data) + 7) // 8
    words = load8_arr(data, nwords)
    assert len(words) == nwords
    assert store8_arr(words, len(data)) == data


@given(st.lists(st.integers(min_value=0, max_value=(1 << 64) - 1), max_size=20))
def test_words_round_trip(words):
    packed = store8_arr(words, 8 * len(words))
    assert len(packed) == 8 * len(words)
    assert load8_arr(packed, len(words)) == words