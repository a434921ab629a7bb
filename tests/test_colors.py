import pytest

from solong.colors import lookup_color, parse_color


def test_lookup_basic_names():
    assert lookup_color("red") == 0xFF0000
    assert lookup_color("black") == 0x0
    assert lookup_color("white") == 0xFFFFFF


def test_lookup_ignores_case():
    assert lookup_color("WHITE") == lookup_color("white")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_lookup_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_lookup_unknown_is_none():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_duplicate_names_take_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    red, green, blue = (gray >> 16) & 0xFF, (gray >> 8) & 0xFF, gray & 0xFF
    assert red == green == blue


def test_gray_scale_endpoints():
    assert lookup_color("gray0") == lookup_color("black")
    assert lookup_color("gray100") == lookup_color("white")


def test_parse_hex():
    assert parse_color("#FF0000") == 0xFF0000
    assert parse_color("#ff0000") == 0xFF0000


def test_parse_hex_stops_at_invalid_digit():
    assert parse_color("#12zz") == 0x12
    assert parse_color("#") == 0
    assert parse_color("#0x1f") == 0x1F


def test_parse_hex_wraps_to_32_bits():
    assert parse_color("#FF000000") == -(1 << 24)


def test_parse_named_with_following_word():
    assert parse_color("dark", "grey") == lookup_color("dark grey")
    assert parse_color("light", "slate") == 0x778899


def test_parse_named_single_word():
    assert parse_color("red") == lookup_color("red")
    assert parse_color("none") == -1


def test_parse_unknown_is_black():
    assert parse_color("mauve-ish") == 0
    assert parse_color("red", "zzz") == 0


def test_parse_long_name_is_truncated():
    long_word = "x" * 100
    assert parse_color("red", long_word) == 0
    assert parse_color("a" * 64) == 0


@pytest.mark.parametrize("name", ["red", "navy", "gold", "thistle4", "seagreen2"])
def test_hex_round_trip(name):
    value = lookup_color(name)
    assert parse_color(f"#{value:06X}") == value
    assert parse_color(f"#{value:06x}") == value