import pytest

from fdfview.colornames import COLOR_TABLE, lookup_color, parse_color_spec


def test_lookup_known_names():
    assert lookup_color("red") == 0xFF0000
    assert lookup_color("navy") == 0x80
    assert lookup_color("white") == 0xFFFFFF


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_lookup_unknown_is_none():
    assert lookup_color("no such colour") is None


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert parse_color_spec("None") == -1


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_every_table_entry_resolves_to_first_occurrence():
    seen = {}
    for name, color in COLOR_TABLE:
        seen.setdefault(name.lower(), color)
    for name, color in seen.items():
        assert lookup_color(name) == color


def test_hex_spec_round_trip():
    for value in (0x000000, 0x123456, 0xABCDEF, 0xFFFFFF):
        assert parse_color_spec(f"#{value:06x}") == value
        assert parse_color_spec(f"#{value:06X}") == value


def test_hex_spec_stops_at_invalid_digit():
    assert parse_color_spec("#ffzz") == 0xFF
    assert parse_color_spec("#zz") == 0


def test_hex_spec_ignores_suffix():
    assert parse_color_spec("#ff0000", "blue") == 0xFF0000


def test_suffix_joins_two_words():
    assert parse_color_spec("dark", "slate") == 0x2F4F4F
    assert parse_color_spec("ghost", "white") == lookup_color("ghostwhite")


def test_unknown_spec_is_zero():
    assert parse_color_spec("nonexistent") == 0
    assert parse_color_spec("red", "nonexistent") == 0


def test_single_word_spec_matches_lookup():
    for name in ("snow", "orchid", "chartreuse3", "lightgreen"):
        assert parse_color_spec(name) == lookup_color(name)


def test_overlong_combined_spec_is_truncated():
    long_word = "x" * 100
    assert parse_color_spec("red", long_word) == 0
    assert parse_color_spec(long_word, "red") == 0