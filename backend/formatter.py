# formatter.py
from typing import Any, Tuple

from errors import QuizError
from schemas import ErrorOut

OK = 200
SERVER_ERROR = 500


def format_success(questions: list) -> Tuple[int, list]:
    return OK, questions


def format_error(error: QuizError) -> Tuple[int, dict]:
    # every failure kind maps to 500, caller input problems included
    out = ErrorOut(error=error.message, **error.diagnostics())
    return SERVER_ERROR, out.model_dump(exclude_unset=True)


def run(fn, *args, **kwargs) -> Tuple[int, Any]:
    # the one place a business call turns into (status, body)
    try:
        return format_success(fn(*args, **kwargs))
    except QuizError as e:
        return format_error(e)
