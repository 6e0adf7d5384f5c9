# rhythm_kit/kit/theme.py
from typing import Any, Dict, Mapping

from models.data_classes import BorderSpec, HeadingSpec, TextSpec, Theme, Typography
from models.errors import ConfigError

FONT_BODY = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif"
FONT_HEADING = "Georgia, 'Times New Roman', serif"

THEME = {
    "name": "light",
    "typography": {
        "font_size": 16,
        "font_size_scale": 1.25,
        "line_height": 24,
    },
    "colors": {
        "primary": "#1796FF",
        "success": "#22c55e",
        "warning": "#f59e0b",
        "danger": "#ef4444",
        "black": "#00223E",
        "white": "#ffffff",
        "gray": "#94a3b8",
        "background": "#ffffff",
        "transparent": "transparent",
    },
    "border": {"width": 1, "radius": 2},
    "text": {"font_family": FONT_BODY, "bold": 600},
    "heading": {"font_family": FONT_HEADING, "margin_bottom": 1},
}

DARK_THEME = {
    **THEME,
    "name": "dark",
    "colors": {
        **THEME["colors"],
        "primary": "#6ee7ff",
        "black": "#B2DCFF",
        "white": "#00223E",
        "gray": "#475569",
        "background": "#00223E",
    },
}


def _section(raw: Mapping[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key)
    if not isinstance(value, Mapping):
        raise ConfigError(f"Theme is missing the '{key}' section")
    return dict(value)


def build_theme(raw: Mapping[str, Any]) -> Theme:
    """
    Build a frozen Theme out of a plain dict shaped like THEME.
    Fails fast on the gaps the style engine would otherwise hit at render time.
    """
    typography = _section(raw, "typography")
    colors = _section(raw, "colors")
    border = _section(raw, "border")
    text = _section(raw, "text")
    heading = _section(raw, "heading")

    line_height = typography.get("line_height")
    if isinstance(line_height, bool) or not isinstance(line_height, (int, float)) or line_height <= 0:
        raise ConfigError(f"typography.line_height must be a positive number, got {line_height!r}")
    if "gray" not in colors:
        raise ConfigError("Theme colors must define 'gray' (default border color)")

    try:
        return Theme(
            name=str(raw.get("name") or "default"),
            typography=Typography(**typography),
            colors=colors,
            border=BorderSpec(**border),
            text=TextSpec(**text),
            heading=HeadingSpec(**heading),
        )
    except TypeError as e:
        raise ConfigError(f"Invalid theme definition: {e}") from e


THEMES = {t["name"]: build_theme(t) for t in (THEME, DARK_THEME)}
DEFAULT_THEME = THEMES["light"]
