import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

# Leading numeric prefix, trailing text ignored ("85分" -> 85, "3/5" -> 3).
_NUMBER_PREFIX_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY_RE = re.compile(r"^([+-]?)Infinity")

# Wide enough for any finite float at one decimal place.
_MARK_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)
_ONE_DECIMAL = Decimal("0.1")


def parse_number(value: object) -> Optional[float]:
    """Return the leading number in ``value`` or None when there is none."""
    text = str(value if value is not None else "").strip()
    if not text:
        return None

    match = _NUMBER_PREFIX_RE.match(text)
    if match:
        return float(match.group(0))

    infinity = _INFINITY_RE.match(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return None


def is_number(value: object) -> bool:
    return parse_number(value) is not None


def format_mark(value: float) -> str:
    """Render with one decimal, rounding halves away from zero on the exact binary value."""
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        value = 0.0
    return str(Decimal(value).quantize(_ONE_DECIMAL, context=_MARK_CONTEXT))
