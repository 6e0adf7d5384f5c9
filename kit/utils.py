# rhythm_kit/kit/utils.py
from decimal import Decimal
from typing import Any, Dict, Mapping

import numpy as np


def css_value(v: Any) -> Any:
    # numpy scalars first: np.float64 is also a float.
    if isinstance(v, np.bool_): return bool(v)
    if isinstance(v, np.integer): return int(v)
    if isinstance(v, np.floating):
        f = float(v)
        return int(f) if f.is_integer() else f
    if v is None or isinstance(v, (bool, int, float, str)): return v
    if isinstance(v, Decimal): return float(v)
    return str(v)


def css_safe(style: Mapping[str, Any]) -> Dict[str, Any]:
    """Coerce a computed style to JSON primitives Dash can serialize (numpy scalars from themes included)."""
    return {str(k): css_value(v) for k, v in style.items()}
