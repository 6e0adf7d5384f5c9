# rhythm_kit/kit/box.py
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from kit.units import rhythm_or_string
from models.data_classes import RhythmWarning, StyleResult, Theme
from models.errors import ConfigError

RHYTHM_OUTLINE = "solid 1px red"
SIDES = ("Bottom", "Left", "Right", "Top")


class Rule(Enum):
    PASS = "pass"
    UNIT = "unit"
    PAIR = "pair"
    SCALAR = "scalar"
    COLOR = "color"
    RADIUS = "radius"


PROP_RULES = {
    # Plain props.
    **{p: Rule.PASS for p in (
        "display", "flex", "flexDirection", "flexFlow", "flexGrow", "flexWrap",
        "alignItems", "alignContent", "justifyContent", "order", "flexShrink",
        "flexBasis", "alignSelf",
    )},
    # Rhythm or string props.
    **{p: Rule.UNIT for p in (
        "marginBottom", "marginLeft", "marginRight", "marginTop",
        "paddingBottom", "paddingLeft", "paddingRight", "paddingTop",
        "width", "height", "maxWidth", "maxHeight", "minWidth", "minHeight",
    )},
    "marginHorizontal": Rule.PAIR,
    "marginVertical": Rule.PAIR,
    "paddingHorizontal": Rule.PAIR,
    "paddingVertical": Rule.PAIR,
    "margin": Rule.SCALAR,
    "padding": Rule.SCALAR,
    "backgroundColor": Rule.COLOR,
    "borderRadius": Rule.RADIUS,
}

DIRECTION_MAPPING = {
    "marginHorizontal": ("marginLeft", "marginRight"),
    "marginVertical": ("marginTop", "marginBottom"),
    "paddingHorizontal": ("paddingLeft", "paddingRight"),
    "paddingVertical": ("paddingTop", "paddingBottom"),
}

# General shorthands first so per-edge props override them.
_PRECEDENCE = {Rule.SCALAR: 0, Rule.PAIR: 1}


def prop_to_style(prop: str, value: Any, theme: Theme) -> Dict[str, Any]:
    rule = PROP_RULES.get(prop)
    if rule is None:
        return {}
    if rule is Rule.PASS:
        return {prop: value}
    if rule is Rule.UNIT:
        return {prop: rhythm_or_string(theme, value)}
    if rule is Rule.PAIR:
        resolved = rhythm_or_string(theme, value)
        return {d: resolved for d in DIRECTION_MAPPING[prop]}
    if rule is Rule.SCALAR:
        # Split shorthand so every edge stays computable.
        resolved = rhythm_or_string(theme, value)
        return {f"{prop}{side}": resolved for side in SIDES}
    if rule is Rule.COLOR:
        if value == "transparent":
            return {prop: value}
        return {prop: theme.color(value)}
    return {prop: value or theme.border.radius}


def props_to_style(theme: Theme, props: Mapping[str, Any]) -> Dict[str, Any]:
    recognized = [
        p for p in props
        if p != "theme" and p in PROP_RULES and props[p] is not None
    ]
    recognized.sort(key=lambda p: _PRECEDENCE.get(PROP_RULES[p], 2))
    style: Dict[str, Any] = {}
    for prop in recognized:
        style.update(prop_to_style(prop, props[prop], theme))
    return style


# inlehmansterms.net/2014/06/09/groove-to-a-vertical-rhythm
def adjust_padding_for_rhythm(
    suppress_rhythm_warning: bool,
    border: Any,
    border_width: Any,
    style: Mapping[str, Any],
) -> Tuple[Dict[str, Any], Tuple[RhythmWarning, ...]]:
    if not border_width:
        return {}, ()
    padding: Dict[str, Any] = {}
    diagnostics = []
    for side in SIDES:
        if border is not True and str(border).lower() != side.lower():
            continue
        padding_prop = f"padding{side}"
        padding_value = style.get(padding_prop, 0)
        if isinstance(padding_value, str):
            # Opaque length, nothing to compensate against.
            padding[padding_prop] = padding_value
            continue
        compensated = padding_value - border_width
        if compensated >= 0:
            padding[padding_prop] = compensated
            continue
        padding[padding_prop] = padding_value
        if suppress_rhythm_warning:
            continue
        direction = "horizontal" if side in ("Left", "Right") else "vertical"
        diagnostics.append(RhythmWarning(padding_prop, direction))
        padding["outline"] = RHYTHM_OUTLINE
    return padding, tuple(diagnostics)


def border_with_rhythm(theme: Theme, props: Mapping[str, Any], style: Mapping[str, Any]) -> StyleResult:
    border = props.get("border")
    if not border:
        return StyleResult()
    if border is True:
        border_prop = "border"
    else:
        side = str(border).lower()
        if side.capitalize() not in SIDES:
            raise ConfigError(f"border must be True or one of top/right/bottom/left, got {border!r}")
        border_prop = f"border{side.capitalize()}"
    border_width = props.get("borderWidth") or theme.border.width
    border_color = theme.color(props["borderColor"]) if props.get("borderColor") else theme.color("gray")
    padding, diagnostics = adjust_padding_for_rhythm(
        bool(props.get("suppressRhythmWarning")),
        border,
        border_width,
        style,
    )
    return StyleResult(
        {**padding, border_prop: f"solid {border_width:g}px {border_color}"},
        diagnostics,
    )


def box_style(theme: Theme, props: Mapping[str, Any]) -> StyleResult:
    style = props_to_style(theme, props)
    border = border_with_rhythm(theme, props, style)
    return StyleResult({**style, **border.style}, border.diagnostics)
