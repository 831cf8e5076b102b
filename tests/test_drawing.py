import pytest

from squaletools.drawing import LineCommand, box_lines, line_command, vectsprite_spans
from squaletools.vectorize import PALETTE, pack_bitmap


def test_line_forward_uses_plain_command():
    cmd = line_command(10, 20, 30, 50)
    assert cmd.command == 0x11
    assert (cmd.x, cmd.y) == (10, 20)
    assert (cmd.xlen, cmd.ylen) == (30 - 10, 50 - 20)


def test_line_negative_x_sets_direction_bit():
    cmd = line_command(30, 20, 10, 20)
    assert cmd.command == 0x11 | 0x02
    assert cmd.command == 0x13


def test_line_negative_y_sets_direction_bit():
    assert line_command(10, 50, 10, 20).command == 0x11 | 0x04


def test_line_both_negative():
    assert line_command(30, 50, 10, 20).command == 0x11 | 0x02 | 0x04


def test_single_point_line():
    assert line_command(5, 5, 5, 5) == LineCommand(x=5, y=5, xlen=0, ylen=0, command=0x11)


@pytest.mark.parametrize("coords", [(0, 0, 255, 255), (200, 3, 7, 180), (1, 250, 249, 2)])
def test_reversed_line_has_same_lengths(coords):
    x1, y1, x2, y2 = coords
    forward = line_command(x1, y1, x2, y2)
    backward = line_command(x2, y2, x1, y1)
    assert (forward.xlen, forward.ylen) == (backward.xlen, backward.ylen)
    assert (backward.x, backward.y) == (x2, y2)


@pytest.mark.parametrize("coords", [(-1, 0, 0, 0), (0, 256, 0, 0), (0, 0, 300, 0), (0, 0, 0, -5)])
def test_out_of_range_coordinates_raise(coords):
    with pytest.raises(ValueError):
        line_command(*coords)


def test_box_lines_start_points():
    lines = box_lines(5, 40, 251, 251)
    assert [(line.x, line.y) for line in lines] == [(5, 40), (5, 40), (251, 251), (251, 251)]


def test_box_lines_match_individual_lines():
    lines = box_lines(5, 40, 251, 251)
    assert lines == [
        line_command(5, 40, 251, 40),
        line_command(5, 40, 5, 251),
        line_command(251, 251, 5, 251),
        line_command(251, 251, 251, 40),
    ]


def test_box_lines_are_axis_aligned():
    for line in box_lines(10, 20, 100, 200):
        assert line.xlen == 0 or line.ylen == 0


def test_vectsprite_short_and_long_entries():
    data = bytes([2, 1, 0x37, 2, 0x21, 0x05, 200])
    assert vectsprite_spans(data) == [[(3, 7)], [(2, 1), (200, 5)]]


def test_vectsprite_zero_entries_means_256():
    data = bytes([1, 0]) + bytes([0x12]) * 256
    spans = vectsprite_spans(data)
    assert len(spans[0]) == 256
    assert set(spans[0]) == {(1, 2)}


def test_vectsprite_no_lines():
    assert vectsprite_spans(bytes([0])) == []


@pytest.mark.parametrize("data", [b"", bytes([1]), bytes([1, 2, 0x11]), bytes([1, 1, 0x05])])
def test_vectsprite_truncated_raises(data):
    with pytest.raises(ValueError):
        vectsprite_spans(data)


def test_round_trip_with_packer():
    red, blue, white = PALETTE[6], PALETTE[3], PALETTE[0]
    rows = [
        [red] * 3 + [blue] * 20 + [white] * 2,
        [white] * 25,
        [blue, red] * 12 + [blue],
    ]
    spans = vectsprite_spans(pack_bitmap(rows))
    assert len(spans) == len(rows)
    for row, line in zip(rows, spans):
        expanded = [PALETTE[color] for length, color in line for _ in range(length)]
        assert expanded == row