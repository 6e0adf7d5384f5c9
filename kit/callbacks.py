# rhythm_kit/kit/callbacks.py
import logging

import dash
from dash import Input, Output

from kit.components import build_home_page
from kit.theme import DEFAULT_THEME, THEMES

logger = logging.getLogger(__name__)


def render_page(theme_name):
    theme = THEMES.get(theme_name)
    if theme is None:
        logger.warning("Unknown theme %r, falling back to %r", theme_name, DEFAULT_THEME.name)
        theme = DEFAULT_THEME
    return build_home_page(theme)


def register_callbacks(app: dash.Dash):

    # --- Theme switch -> re-render the page body with the selected theme ---
    @app.callback(
        Output("page-body", "children"),
        Input("theme-switch", "value"),
        prevent_initial_call=False,
    )
    def _switch_theme(theme_name):
        return render_page(theme_name)
