# quiz.py
import json
import logging
import re
import time
from typing import Any, Callable, Mapping, Optional, Protocol

from config import Settings
from errors import ConfigurationError, GenerationParseError, GeneratorError, QuizError
from prompts import build_prompt
from schemas import QuizRequest
from utils import first_present, parse_int, validate_questions

logger = logging.getLogger(__name__)

# ```json (plus trailing whitespace) or a bare ```
FENCE_RE = re.compile(r"```json\s*|```")


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


def normalize_request(body: Optional[Mapping[str, Any]] = None,
                      query: Optional[Mapping[str, Any]] = None) -> QuizRequest:
    body = body if isinstance(body, Mapping) else {}
    query = query or {}
    return QuizRequest(
        category=str(first_present(body.get("category"), query.get("category"), default="general knowledge")),
        num_questions=parse_int(first_present(body.get("numQuestions"), query.get("numQuestions"), default="3")),
        difficulty=str(first_present(body.get("difficulty"), query.get("difficulty"), default="any")),
    )


def clean_response_text(text: str) -> str:
    return FENCE_RE.sub("", text).strip()


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"invalid JSON constant: {name}")


def parse_questions(text: str) -> Any:
    """Strips code fences and parses JSON; failure keeps the raw text for diagnostics."""
    try:
        return json.loads(clean_response_text(text or ""), parse_constant=_reject_constant)
    except ValueError as e:
        raise GenerationParseError(text, str(e)) from e


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class QuizService:
    """
    request -> prompt -> generator -> cleaned JSON -> validated question list.
    Every failure is raised as a QuizError; status codes are decided by formatter.py.
    """

    def __init__(self, settings: Settings, generator: Optional[TextGenerator],
                 clock: Callable[[], int] = _epoch_ms):
        self.settings = settings
        self.generator = generator
        self.clock = clock

    def generate(self, req: QuizRequest) -> list:
        if not self.settings.has_api_key or self.generator is None:
            logger.error("GEMINI_API_KEY is not set.")
            raise ConfigurationError("API key not configured")

        nonce = self.clock() if self.settings.prompt_nonce else None
        prompt = build_prompt(req, nonce=nonce)
        logger.debug("Sending prompt to Gemini: %s", prompt)

        try:
            text = self.generator.generate(prompt)
        except QuizError:
            raise
        except Exception as e:
            logger.exception("Error generating quiz questions")
            raise GeneratorError(str(e)) from e
        logger.debug("Raw AI response: %s", text)

        try:
            data = parse_questions(text)
        except GenerationParseError:
            logger.error("Failed to parse AI response as JSON. Raw response was: %s", text)
            raise

        try:
            return validate_questions(data)
        except QuizError:
            logger.error("AI generated questions in an unexpected format: %r", data)
            raise

    def handle(self, body=None, query=None) -> list:
        req = normalize_request(body, query)
        logger.info("Quiz request: category=%r num_questions=%s difficulty=%s",
                    req.category, req.num_questions, req.difficulty)
        return self.generate(req)
