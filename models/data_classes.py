# rhythm_kit/models/data_classes.py
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, Union

from models.errors import ConfigError

Number = Union[int, float]


@dataclass(frozen=True)
class Typography:
    line_height: Number
    font_size: Number = 16
    font_size_scale: float = 1.25

    def rhythm(self, n: Number) -> Number:
        return self.line_height * n

    def font_size_for(self, level: Number) -> int:
        return round(self.font_size * self.font_size_scale ** level)

    def line_height_for(self, font_size: Number) -> Number:
        # Smallest rhythm multiple that fits the glyphs.
        return max(1, math.ceil(font_size / self.line_height)) * self.line_height


@dataclass(frozen=True)
class BorderSpec:
    width: Number = 1
    radius: Number = 2


@dataclass(frozen=True)
class TextSpec:
    font_family: str
    bold: Union[int, str] = 700


@dataclass(frozen=True)
class HeadingSpec:
    font_family: str
    margin_bottom: Number = 1


@dataclass(frozen=True)
class Theme:
    name: str
    typography: Typography
    colors: Mapping[str, str]
    border: BorderSpec
    text: TextSpec
    heading: HeadingSpec

    def __post_init__(self):
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))

    def __hash__(self):
        return hash((self.name, self.typography, tuple(sorted(self.colors.items())), self.border, self.text, self.heading))

    def color(self, name: str) -> str:
        try:
            return self.colors[name]
        except KeyError:
            raise ConfigError(f"Theme '{self.name}' has no color named {name!r}") from None


@dataclass(frozen=True)
class RhythmWarning:
    prop: str
    direction: str

    @property
    def message(self) -> str:
        return (
            f"Increase {self.prop} to ensure {self.direction} rhythm. "
            "Use suppressRhythmWarning prop to suppress this warning."
        )


@dataclass(frozen=True)
class StyleResult:
    style: Dict[str, Any] = field(default_factory=dict)
    diagnostics: Tuple[RhythmWarning, ...] = ()
