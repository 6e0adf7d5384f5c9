# rhythm_kit/kit/components.py
from typing import Any, Mapping, Optional

from dash import html
import dash_bootstrap_components as dbc

from kit.box import box_style
from kit.styled import EXTENDS_KEY, styled
from kit.theme import DEFAULT_THEME, THEMES
from models.data_classes import Theme

Box = styled(box_style, name="Box")


def text_style(theme: Theme, props: Mapping[str, Any]):
    font_size = theme.typography.font_size_for(props.get("size") or 0)
    style = {
        EXTENDS_KEY: Box,
        "color": theme.color(props.get("color") or "black"),
        "fontFamily": theme.text.font_family,
        "fontSize": font_size,
        # React reads a bare number as a multiplier, not pixels.
        "lineHeight": f"{theme.typography.line_height_for(font_size)}px",
    }
    if props.get("bold"):
        style["fontWeight"] = theme.text.bold
    if props.get("italic"):
        style["fontStyle"] = "italic"
    if props.get("align"):
        style["textAlign"] = props["align"]
    if props.get("decoration"):
        style["textDecoration"] = props["decoration"]
    return style


Text = styled(text_style, element=html.Span, name="Text")


def heading_style(theme: Theme, props: Mapping[str, Any]):
    style = {
        EXTENDS_KEY: Text,
        "fontFamily": theme.heading.font_family,
    }
    if props.get("marginBottom") is None:
        style["marginBottom"] = theme.typography.rhythm(theme.heading.margin_bottom)
    return style


Heading = styled(
    heading_style,
    name="Heading",
    default_props={"display": "block", "bold": True},
)


def paragraph_style(theme: Theme, props: Mapping[str, Any]):
    return {EXTENDS_KEY: Text}


Paragraph = styled(
    paragraph_style,
    element=html.P,
    name="Paragraph",
    default_props={"display": "block", "marginTop": 0, "marginBottom": 1},
)


def button_style(theme: Theme, props: Mapping[str, Any]):
    style = {
        EXTENDS_KEY: Text,
        "cursor": "pointer",
        "userSelect": "none",
    }
    if not props.get("borderRadius"):
        style["borderRadius"] = theme.border.radius
    if not props.get("border"):
        style["border"] = "none"
    if props.get("disabled"):
        style.update({"opacity": 0.5, "cursor": "default"})
    return style


Button = styled(
    button_style,
    element=html.Button,
    pass_props=("n_clicks", "disabled", "title"),
    name="Button",
    default_props={
        "display": "inline-block",
        "color": "white",
        "backgroundColor": "primary",
        "paddingHorizontal": 1,
        "bold": True,
    },
)


def PageHeader(heading: str, description: str, theme: Optional[Theme] = None):
    return Box([
        Heading(heading, theme=theme, size=3, marginBottom=0),
        Paragraph(description, theme=theme, color="gray"),
    ], theme=theme, marginBottom=1)


BUTTON_COLORS = ("primary", "success", "warning", "danger", "black", "gray")


def build_home_page(theme: Theme = DEFAULT_THEME):
    """Showcase of the primitives; every style below is computed from `theme`."""
    return Box([
        PageHeader(
            "Rhythm Kit",
            "Starter kit of themed primitives. Every vertical space is a multiple of the line height.",
            theme=theme,
        ),
        Heading("Heading", theme=theme, size=2),
        Paragraph(
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do "
            "eiusmod tempor incididunt ut labore et dolore magna aliqua.",
            theme=theme,
        ),
        Box([
            Text("normal text", theme=theme, size=0), html.Br(),
            Text("small text", theme=theme, size=-1), html.Br(),
            Text("text 5", theme=theme, size=5),
        ], theme=theme, marginBottom=1),
        Box([
            Button(color_name, theme=theme, id=f"button-{color_name}", backgroundColor=color_name, marginRight=0.5)
            for color_name in BUTTON_COLORS
        ], theme=theme, marginBottom=1),
        Box([
            Button("disabled", theme=theme, disabled=True, marginRight=0.5),
            Button("outlined", theme=theme, backgroundColor="transparent", color="primary",
                   border=True, borderColor="primary", paddingVertical=0.5),
        ], theme=theme, marginBottom=1),
        Box(
            Text("Bordered box keeps its rhythm.", theme=theme),
            theme=theme,
            border=True,
            padding=1,
            borderRadius=0,
        ),
    ], theme=theme, backgroundColor="background", padding=1, minHeight="100vh")


def build_app_layout():
    """App bar with the theme switch; the page body is re-rendered per theme by callbacks.py."""
    theme = DEFAULT_THEME
    return html.Div(
        [
            Box(
                [
                    Text("Rhythm Kit", theme=theme, size=1, bold=True),
                    dbc.RadioItems(
                        id="theme-switch",
                        options=[{"label": name.capitalize(), "value": name} for name in THEMES],
                        value=theme.name,
                        inline=True,
                        persistence=True,
                        persistence_type="session",
                    ),
                ],
                theme=theme,
                display="flex",
                justifyContent="space-between",
                alignItems="center",
                paddingHorizontal=0.5,
                paddingBottom=0.5,
                border="bottom",
            ),
            html.Div(id="page-body", children=build_home_page(theme)),
        ],
        style={"minHeight": "100vh"},
    )
