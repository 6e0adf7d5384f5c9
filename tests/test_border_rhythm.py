import pytest

from kit.box import RHYTHM_OUTLINE, adjust_padding_for_rhythm, border_with_rhythm, box_style
from models.data_classes import RhythmWarning
from models.errors import ConfigError


def test_no_border_is_a_noop(theme):
    result = border_with_rhythm(theme, {"paddingTop": 1}, {"paddingTop": 20})
    assert result.style == {}
    assert result.diagnostics == ()


def test_border_compensates_padding(theme, gray):
    result = box_style(theme, {"border": True, "paddingTop": 1})
    assert result.style["paddingTop"] == 19
    assert result.style["border"] == f"solid 1px {gray}"


def test_full_border_compensates_every_edge(theme):
    result = box_style(theme, {"border": True, "padding": 1})
    assert result.style["paddingTop"] == 19
    assert result.style["paddingBottom"] == 19
    assert result.style["paddingLeft"] == 19
    assert result.style["paddingRight"] == 19
    assert "outline" not in result.style
    assert result.diagnostics == ()


def test_side_border_only_touches_its_edge(theme, gray):
    result = box_style(theme, {"border": "left", "padding": 1})
    assert result.style["paddingLeft"] == 19
    assert result.style["paddingTop"] == 20
    assert result.style["borderLeft"] == f"solid 1px {gray}"
    assert "border" not in result.style


def test_side_is_case_insensitive(theme):
    result = box_style(theme, {"border": "Top", "paddingTop": 1})
    assert result.style["paddingTop"] == 19
    assert "borderTop" in result.style


def test_unknown_side_is_a_config_error(theme):
    with pytest.raises(ConfigError, match="border must be True"):
        box_style(theme, {"border": "diagonal"})


def test_border_width_and_color_props(theme):
    result = box_style(theme, {"border": "bottom", "borderWidth": 4, "borderColor": "danger", "paddingBottom": 1})
    assert result.style["paddingBottom"] == 16
    assert result.style["borderBottom"] == f"solid 4px {theme.colors['danger']}"


def test_unknown_border_color_is_a_config_error(theme):
    with pytest.raises(ConfigError):
        box_style(theme, {"border": True, "borderColor": "nope", "padding": 1})


def test_string_padding_passes_through_without_warning(theme):
    result = box_style(theme, {"border": True, "paddingTop": "1em", "paddingVertical": 1, "paddingHorizontal": 1})
    assert result.style["paddingTop"] == "1em"
    assert result.style["paddingBottom"] == 19
    assert result.diagnostics == ()


def test_insufficient_padding_warns_and_outlines(theme):
    result = box_style(theme, {"border": True, "paddingTop": False, "paddingHorizontal": 1, "paddingBottom": 1})
    assert result.style["outline"] == RHYTHM_OUTLINE
    assert result.style["paddingTop"] == 0
    assert result.style["paddingLeft"] == 19
    assert result.diagnostics == (RhythmWarning("paddingTop", "vertical"),)
    assert "Increase paddingTop to ensure vertical rhythm." in result.diagnostics[0].message


def test_horizontal_edges_report_horizontal_rhythm(theme):
    result = box_style(theme, {"border": "right"})
    assert result.style["paddingRight"] == 0
    assert result.diagnostics == (RhythmWarning("paddingRight", "horizontal"),)


def test_suppressed_failure_drops_warning_and_outline(theme):
    result = box_style(theme, {"border": True, "paddingTop": False, "suppressRhythmWarning": True})
    assert result.diagnostics == ()
    assert "outline" not in result.style
    assert result.style["paddingTop"] == 0


def test_suppressed_failure_keeps_other_edges_compensated(theme):
    # Suppression silences one edge, it does not discard the others.
    result = box_style(theme, {
        "border": True,
        "paddingTop": False,
        "paddingBottom": 1,
        "paddingHorizontal": 1,
        "suppressRhythmWarning": True,
    })
    assert result.style["paddingBottom"] == 19
    assert result.style["paddingLeft"] == 19
    assert result.style["paddingRight"] == 19
    assert result.style["paddingTop"] == 0


def test_zero_border_width_skips_compensation():
    assert adjust_padding_for_rhythm(False, True, 0, {"paddingTop": 20}) == ({}, ())


def test_vertical_spacing_stays_on_rhythm(theme):
    style = box_style(theme, {"margin": 1, "paddingVertical": 2, "border": "left"}).style
    for prop in ("marginTop", "marginBottom", "paddingTop", "paddingBottom"):
        assert style[prop] % 20 == 0
