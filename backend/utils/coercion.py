import math
import re
from typing import Any, Optional

# Same set PHP-style trim() strips; str.strip() would also eat unicode spaces.
TRIM_CHARS = " \t\n\r\0\x0b"

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_TRUE_STRINGS = {"1", "true", "on", "yes"}


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_RE.match(value))
    return False


def to_number(value: Any) -> float:
    """Convert a value that passed ``is_numeric`` to a float."""
    if isinstance(value, str):
        return float(value.strip())
    return float(value)


def to_int(value: Any) -> int:
    # ints are kept exact; anything else truncates toward zero
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = to_number(value)
    if not math.isfinite(number):
        raise ValueError(f"cannot convert {value!r} to an integer")
    return math.trunc(number)


def normalize_str(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip(TRIM_CHARS)


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, str):
        return value.strip(TRIM_CHARS).lower() in _TRUE_STRINGS
    return False


def to_optional_rating(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return to_number(value)


def parse_page(raw: Optional[str]) -> int:
    """Leading integer of a query value; anything unparseable counts as 0."""
    if raw is None:
        return 1
    match = _LEADING_INT_RE.match(raw)
    if not match:
        return 0
    return int(match.group(1))
