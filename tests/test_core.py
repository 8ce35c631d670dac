import pytest

from rustsense.core import ByteRange


def test_shift_moves_both_ends_and_keeps_length():
    original = ByteRange(2, 9)
    shifted = original.shift(4)
    assert shifted.start - original.start == 4
    assert shifted.end - original.end == 4
    assert shifted.end - shifted.start == original.end - original.start


def test_shift_by_zero_is_identity():
    original = ByteRange(3, 7)
    assert original.shift(0) == original


def test_shift_round_trip():
    original = ByteRange(10, 20)
    assert original.shift(5).shift(-5) == original


def test_shift_does_not_mutate():
    original = ByteRange(1, 2)
    original.shift(3)
    assert original == ByteRange(1, 2)


def test_to_slice_selects_range_of_bytes():
    data = b"hello world"
    assert data[ByteRange(0, 5).to_slice()] == b"hello"
    assert data[ByteRange(6, 11).to_slice()] == b"world"


def test_to_slice_matches_start_and_end():
    sl = ByteRange(4, 8).to_slice()
    assert (sl.start, sl.stop) == (4, 8)


def test_byte_range_is_immutable():
    r = ByteRange(0, 1)
    with pytest.raises(AttributeError):
        r.start = 5  # type: ignore[misc]
    assert r.start == 0
    assert r == ByteRange(0, 1)


def test_byte_range_is_hashable_by_value():
    ranges = {ByteRange(0, 1), ByteRange(0, 1), ByteRange(1, 2)}
    assert len(ranges) == 2