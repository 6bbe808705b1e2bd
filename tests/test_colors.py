import pytest

from palette_docs.colors import _round_half_up, hex_to_rgb, rgb_to_hex, rgb_to_hsl
from palette_docs.errors import ColorFormatError

# ---------------------------------------------------------------------
# hex_to_rgb
# ---------------------------------------------------------------------


@pytest.mark.parametrize("value", ["#E06C75", "E06C75", "#e06c75"])
def test_hex_to_rgb_accepts_optional_hash(value):
    assert hex_to_rgb(value) == (224, 108, 117)


@pytest.mark.parametrize("value", ["#282c34", "000000", "#FFFFFF", "#0a0B0c"])
def test_hex_round_trip(value):
    expected = value.lower() if value.startswith("#") else f"#{value.lower()}"
    assert rgb_to_hex(*hex_to_rgb(value)) == expected


@pytest.mark.parametrize(
    "value",
    ["", "#", "#12345", "#1234567", "#ZZZZZZ", "##112233", "0x1234", " 123456", "#E06C75\n"],
)
def test_hex_to_rgb_rejects_malformed(value):
    with pytest.raises(ColorFormatError):
        hex_to_rgb(value)


def test_color_format_error_is_value_error():
    with pytest.raises(ValueError, match="invalid hex color: ZZZZZZ"):
        hex_to_rgb("#ZZZZZZ")


# ---------------------------------------------------------------------
# rgb_to_hsl
# ---------------------------------------------------------------------


@pytest.mark.parametrize(
    "rgb,hsl",
    [
        ((0, 0, 0), (0, 0, 0)),
        ((255, 255, 255), (0, 0, 100)),
        ((255, 0, 0), (0, 100, 50)),
        ((0, 255, 0), (120, 100, 50)),
        ((0, 0, 255), (240, 100, 50)),
        ((224, 108, 117), (355, 65, 65)),
        ((40, 44, 52), (220, 13, 18)),
    ],
)
def test_rgb_to_hsl(rgb, hsl):
    assert rgb_to_hsl(*rgb) == hsl


@pytest.mark.parametrize("v", range(0, 256, 17))
def test_achromatic_has_no_saturation(v):
    h, s, _ = rgb_to_hsl(v, v, v)
    assert (h, s) == (0, 0)


def test_hue_rounding_up_to_360_wraps_to_zero():
    assert rgb_to_hsl(255, 0, 1) == (0, 100, 50)


@pytest.mark.parametrize("x,expected", [(0.5, 1), (2.5, 3), (1.49, 1), (0.0, 0)])
def test_round_half_away_from_zero(x, expected):
    assert _round_half_up(x) == expected
