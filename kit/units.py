# rhythm_kit/kit/units.py
from decimal import Decimal
from numbers import Real
from typing import Any, Union

from models.data_classes import Theme


def rhythm_or_string(theme: Theme, value: Any) -> Union[int, float, str]:
    """Numbers are rhythm multiples, strings are opaque lengths, anything falsy is 0."""
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, Real) and not isinstance(value, bool):
        return theme.typography.line_height * value
    return value or 0
