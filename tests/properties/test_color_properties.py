import re

from hypothesis import given, strategies as st

from roadboard.board import (
    brighten_color,
    get_luminance,
    get_perceived_lightness,
    hex_to_hsl,
    hex_to_rgb,
    string_to_hsl_color,
)

hex_colors = st.from_regex(r"#?[0-9a-fA-F]{6}", fullmatch=True)

HSL_PATTERN = re.compile(r"hsl\((\d+), 65%, 55%\)")


@given(color=hex_colors)
def test_hsl_components_in_range(color: str) -> None:
    h, s, l = hex_to_hsl(color)  # noqa: E741

    assert 0 <= h < 360
    assert 0 <= s <= 100
    assert 0 <= l <= 100


@given(color=hex_colors)
def test_lightness_measures_in_unit_range(color: str) -> None:
    assert 0 <= get_luminance(color) <= 1
    assert 0 <= get_perceived_lightness(color) <= 1


@given(color=hex_colors, amount=st.floats(min_value=0, max_value=1))
def test_brighten_never_darkens(color: str, amount: float) -> None:
    result = brighten_color(color, amount)

    assert re.fullmatch(r"#[0-9a-f]{6}", result)
    for before, after in zip(hex_to_rgb(color), hex_to_rgb(result), strict=True):
        assert after >= before


@given(text=st.text())
def test_string_color_hue_in_range(text: str) -> None:
    match = HSL_PATTERN.fullmatch(string_to_hsl_color(text))

    assert match is not None
    assert 0 <= int(match.group(1)) < 360
    assert string_to_hsl_color(text) == match.group(0)
