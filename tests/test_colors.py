import pytest

from minirt.colors import color_names, lookup_color


def _channels(value):
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def test_pinned_values_from_database():
    assert lookup_color("red") == 0xFF0000
    assert lookup_color("white") == 0xFFFFFF
    assert lookup_color("black") == 0


def test_none_is_minus_one():
    assert lookup_color("none") == -1


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == lookup_color("darkslategray")
    assert lookup_color("light goldenrod") == lookup_color("lightgoldenrodyellow")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("no such colour")


def test_lookup_is_case_sensitive():
    with pytest.raises(KeyError):
        lookup_color("RED")


def test_names_unique_and_lowercase():
    names = color_names()
    assert len(names) == len(set(names))
    assert all(name == name.lower() for name in names)
    assert names[0] == "snow"
    assert names[-1] == "none"


def test_every_name_resolves_in_range():
    for name in color_names():
        value = lookup_color(name)
        if name == "none":
            assert value == -1
        else:
            assert 0 <= value <= 0xFFFFFF


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree_and_are_neutral(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    r, g, b = _channels(gray)
    assert r == g == b


def test_gray_ramp_is_increasing_from_black_to_white():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("navy blue", "navyblue"),
        ("ghost white", "ghostwhite"),
        ("medium purple", "mediumpurple"),
        ("light green", "lightgreen"),
        ("dark red", "darkred"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("base", ["red", "green", "blue", "yellow", "magenta", "cyan"])
def test_numbered_variants_darken(base):
    values = [lookup_color(f"{base}{n}") for n in range(1, 5)]
    assert values == sorted(values, reverse=True)