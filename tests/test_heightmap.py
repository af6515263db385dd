import pytest

from fdfview.heightmap import HeightMap, MapError, count_row_gaps, load_map, parse_map_text

SQUARE = "0 0 0\n0 10 0\n0 0 0\n"


@pytest.mark.parametrize("count", [1, 2, 5, 19])
def test_gaps_between_values(count):
    assert count_row_gaps(" ".join(["7"] * count)) == count - 1


def test_gaps_trailing_space_counts():
    assert count_row_gaps("1 2 3 ") == count_row_gaps("1 2 3 4")


def test_gaps_ignore_repeated_spaces():
    assert count_row_gaps("1    2  3") == count_row_gaps("1 2 3")


def test_gaps_newline_does_not_count():
    assert count_row_gaps("1 2 3\n") == count_row_gaps("1 2 3")


def test_parse_square():
    heightmap = parse_map_text(SQUARE)
    assert heightmap.width == 2
    assert heightmap.height == 2
    assert heightmap.altitude(1, 1) == 10
    assert heightmap.altitude(0, 0) == 0


def test_parse_without_final_newline_is_same():
    assert parse_map_text(SQUARE.rstrip("\n")) == parse_map_text(SQUARE)


def test_parse_negative_values():
    heightmap = parse_map_text("-5 3\n4 -2\n")
    assert heightmap.altitude(0, 0) == -5
    assert heightmap.altitude(1, 1) == -2


def test_parse_colour_suffix_is_ignored():
    heightmap = parse_map_text("1,0xFF 2,0xFF\n")
    assert heightmap.width == 1
    assert heightmap.altitude(1, 0) == 2


def test_rows_are_indexed_by_y():
    heightmap = parse_map_text("1 2\n3 4\n")
    assert heightmap.rows == ((1, 2), (3, 4))
    assert heightmap.altitude(0, 1) == 3


def test_length_mismatch_raises():
    with pytest.raises(MapError):
        parse_map_text("0 0 0\n0 0\n")


def test_empty_map_raises():
    with pytest.raises(MapError):
        parse_map_text("")


def test_heightmap_is_immutable():
    heightmap = HeightMap(((1, 2),), 1, 0)
    with pytest.raises(AttributeError):
        heightmap.width = 5
    assert heightmap.width == 1
    assert heightmap.altitude(1, 0) == 2


def test_load_map_matches_text(tmp_path):
    path = tmp_path / "square.fdf"
    path.write_text(SQUARE)
    assert load_map(path) == parse_map_text(SQUARE)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "missing.fdf")