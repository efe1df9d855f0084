import pytest

from fdf.colornames import COLOR_TABLE, NO_COLOR, lookup_color


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_colors(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent():
    assert lookup_color("none") == NO_COLOR == -1


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NONE") == -1


def test_unknown_name_gives_none():
    assert lookup_color("no such colour") is None
    assert lookup_color("") is None


def test_repeated_name_uses_first_entry():
    # "dark slate" appears with several values; the first one is used.
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899


def test_every_entry_resolves_to_its_first_value():
    first_seen = {}
    for name, value in COLOR_TABLE:
        first_seen.setdefault(name.lower(), value)
    for name, value in first_seen.items():
        assert lookup_color(name) == value


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")
        assert lookup_color(f"gray{level}") is not None


def test_gray_scale_is_monotonic():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


def test_non_string_rejected():
    with pytest.raises(TypeError):
        lookup_color(42)