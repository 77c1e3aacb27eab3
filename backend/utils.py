# utils.py
import math
import re
from numbers import Number

from errors import ShapeValidationError

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def first_present(*values, default=None):
    """First truthy value, else the default (empty strings, 0 and None are skipped)."""
    for v in values:
        if v:
            return v
    return default


def parse_int(value):
    """
    Leading-integer parse: "5" -> 5, " 7 questions" -> 7, 2.9 -> 2.
    Anything without a leading integer gives NaN rather than an error.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else math.nan
    m = _LEADING_INT_RE.match(str(value))
    return int(m.group(1)) if m else math.nan


def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _question_ok(q) -> bool:
    if not isinstance(q, dict):
        return False
    if not isinstance(q.get("question"), str):
        return False
    options = q.get("options")
    if not isinstance(options, list) or len(options) != 4:
        return False
    if not all(isinstance(o, str) for o in options):
        return False
    idx = q.get("correct_answer_index")
    return _is_number(idx) and 0 <= idx <= 3


def validate_questions(data) -> list:
    """Returns the list untouched, or raises ShapeValidationError for the whole set."""
    if not isinstance(data, list) or not all(_question_ok(q) for q in data):
        raise ShapeValidationError(data)
    return data
