import pytest

from squaletools.lzh import DICSIZ, unlzh


def _pack_bits(fields):
    bits = "".join(format(value, f"0{width}b") for value, width in fields)
    bits += "0" * (-len(bits) % 8)
    if not bits:
        return b""
    return int(bits, 2).to_bytes(len(bits) // 8, "big")


def _block(count, symbol, position=0):
    # Single-code tables: every symbol is read with zero bits.
    return [
        (count, 16),
        (0, 5), (0, 5),
        (0, 9), (symbol, 9),
        (0, 4), (position, 4),
    ]


def _stream(*blocks):
    fields = []
    for block in blocks:
        fields += block
    fields.append((0, 16))
    return _pack_bits(fields)


def test_empty_input():
    assert unlzh(b"", 100) == b""


def test_literal_block():
    data = _stream(_block(5, ord("A")))
    assert unlzh(data, 100) == b"AAAAA"


def test_two_literal_blocks():
    data = _stream(_block(2, ord("x")), _block(3, ord("y")))
    assert unlzh(data, 100) == b"xxyyy"


def test_match_repeats_previous_byte():
    # symbol 257 is a match of length 4, position code 0 is distance 0
    data = _stream(_block(1, ord("A")), _block(2, 257))
    assert unlzh(data, 100) == b"A" * 9


def test_match_with_distance_one():
    # symbol 256 is a match of length 3, position code 1 is distance 1
    data = _stream(_block(1, ord("A")), _block(1, ord("B")), _block(1, 256, 1))
    assert unlzh(data, 100) == b"ABABA"


def test_output_exact_size():
    data = _stream(_block(5, ord("Z")))
    assert unlzh(data, 5) == b"ZZZZZ"


def test_window_too_large_for_output_is_dropped():
    data = _stream(_block(5, ord("Z")))
    assert unlzh(data, 3) == b""


def test_output_spanning_two_windows():
    data = _stream(_block(9000, ord("q")))
    assert unlzh(data, 9000) == b"q" * 9000


def test_output_stops_at_window_boundary():
    data = _stream(_block(9000, ord("q")))
    assert unlzh(data, DICSIZ) == b"q" * DICSIZ
    assert unlzh(data, DICSIZ + 100) == b"q" * DICSIZ


@pytest.mark.parametrize("count", [1, 7, 300])
def test_output_length_invariant(count):
    data = _stream(_block(count, 0x41))
    result = unlzh(data, 10000)
    assert len(result) == count
    assert set(result) == {0x41}