# rhythm_kit/main.py
import logging

from dash import Dash
from kit.components import build_app_layout
from kit.callbacks import register_callbacks

APP_TITLE = "Rhythm Kit"

def create_app() -> Dash:
    app = Dash(__name__, title=APP_TITLE, suppress_callback_exceptions=True)
    app.layout = build_app_layout()
    register_callbacks(app)
    return app

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(debug=True)
