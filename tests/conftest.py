"""
Rhythm Kit - Test Configuration
Shared fixtures.
"""
import pytest

from kit.theme import THEME, build_theme


def theme_dict(**overrides):
    raw = {
        **THEME,
        "name": "test",
        "typography": {"font_size": 16, "font_size_scale": 1.25, "line_height": 20},
        "border": {"width": 1, "radius": 3},
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def theme():
    """Line height 20, border width 1, light colors."""
    return build_theme(theme_dict())


@pytest.fixture
def gray(theme):
    return theme.colors["gray"]
