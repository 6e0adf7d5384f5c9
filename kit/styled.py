# rhythm_kit/kit/styled.py
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

from dash import html

from kit.theme import DEFAULT_THEME
from kit.utils import css_safe
from models.data_classes import StyleResult, Theme
from models.errors import ConfigError

logger = logging.getLogger(__name__)

EXTENDS_KEY = "$extends"

StyleRule = Callable[[Theme, Mapping[str, Any]], Union[Mapping[str, Any], StyleResult]]


@dataclass(frozen=True, eq=False)
class StyleDefinition:
    """A theme-bound style rule, optionally layered on top of another definition."""

    rule: StyleRule
    extends: Optional[Any] = None
    default_props: Mapping[str, Any] = field(default_factory=dict)
    name: str = ""

    def __repr__(self):
        return f"StyleDefinition({self.name or self.rule.__name__})"


def _as_definition(target: Any) -> StyleDefinition:
    # Styled components can be extended directly.
    target = getattr(target, "definition", target)
    if not isinstance(target, StyleDefinition):
        raise ConfigError(f"{EXTENDS_KEY} must reference a style definition, got {target!r}")
    return target


def _evaluate(definition: StyleDefinition, theme: Theme, props: Mapping[str, Any]) -> StyleResult:
    out = definition.rule(theme, props)
    if isinstance(out, StyleResult):
        return StyleResult(dict(out.style), tuple(out.diagnostics))
    return StyleResult(dict(out or {}))


def _resolve(
    definition: StyleDefinition,
    theme: Theme,
    props: Mapping[str, Any],
    chain: Tuple[StyleDefinition, ...],
) -> StyleResult:
    if any(d is definition for d in chain):
        names = " -> ".join(repr(d) for d in chain + (definition,))
        raise ConfigError(f"Cyclic {EXTENDS_KEY} chain: {names}")
    chain = chain + (definition,)

    own = _evaluate(definition, theme, props)
    style = own.style
    base = style.pop(EXTENDS_KEY, None) or definition.extends
    if base is None:
        return StyleResult(style, own.diagnostics)

    resolved = _resolve(_as_definition(base), theme, props, chain)
    return StyleResult({**resolved.style, **style}, resolved.diagnostics + own.diagnostics)


def resolve_style(definition: Any, theme: Theme, props: Mapping[str, Any]) -> StyleResult:
    """
    Resolve a definition and its $extends chain into one flat style.
    Base styles are computed with the same theme and props; closer keys win.
    """
    return _resolve(_as_definition(definition), theme, props, ())


def apply_default_props(definition: Any, props: Mapping[str, Any]) -> Dict[str, Any]:
    definition = _as_definition(definition)
    merged = dict(definition.default_props)
    merged.update({k: v for k, v in props.items() if v is not None})
    return merged


def compute_style(definition: Any, theme: Theme, props: Mapping[str, Any]) -> StyleResult:
    return resolve_style(definition, theme, apply_default_props(definition, props))


class StyledComponent:
    """Callable that renders a Dash element with a computed inline style."""

    def __init__(self, definition: StyleDefinition, element=html.Div, pass_props: Sequence[str] = ()):
        self.definition = definition
        self.element = element
        self.pass_props = tuple(pass_props)

    def __repr__(self):
        return f"<{self.definition.name or 'Styled'}>"

    def __call__(self, children=None, theme: Optional[Theme] = None, style: Optional[Mapping[str, Any]] = None, **props):
        theme = theme or DEFAULT_THEME
        result = compute_style(self.definition, theme, props)
        for diagnostic in result.diagnostics:
            logger.warning("%s: %s", self.definition.name or "Styled", diagnostic.message)

        element_props = {
            k: props[k] for k in ("id", "className", *self.pass_props)
            if props.get(k) is not None
        }
        computed = {**result.style, **(style or {})}
        return self.element(children, style=css_safe(computed), **element_props)


def styled(
    rule: StyleRule,
    element=html.Div,
    pass_props: Sequence[str] = (),
    extends: Any = None,
    default_props: Optional[Mapping[str, Any]] = None,
    name: Optional[str] = None,
) -> StyledComponent:
    definition = StyleDefinition(
        rule=rule,
        extends=extends,
        default_props=dict(default_props or {}),
        name=name or rule.__name__,
    )
    return StyledComponent(definition, element=element, pass_props=pass_props)
