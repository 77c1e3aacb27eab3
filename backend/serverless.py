# serverless.py: Netlify / AWS Lambda style entry point
import base64
import json
import logging
from typing import Any, Callable, Dict, Optional

from config import configure_logging, load_settings
from formatter import run
from llm import GeminiGenerator
from quiz import QuizService

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _parse_body(raw: Optional[str], base64_encoded: bool = False) -> Any:
    if not raw:
        return {}
    try:
        if base64_encoded:
            raw = base64.b64decode(raw).decode("utf-8", errors="replace")
        return json.loads(raw)
    except ValueError as e:
        # If body is not valid JSON, treat it as empty
        logger.warning("Error parsing JSON body: %s | Raw body was: %r", e, raw[:500])
        return {}


def make_handler(service: QuizService) -> Callable[[Dict[str, Any], Any], Dict[str, Any]]:
    def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
        logger.debug("Received HTTP method: %s", event.get("httpMethod"))
        logger.debug("Raw event.body: %r", event.get("body"))

        body = _parse_body(event.get("body"), bool(event.get("isBase64Encoded")))
        query = event.get("queryStringParameters") or {}

        status, payload = run(service.handle, body, query)
        return {
            "statusCode": status,
            "body": json.dumps(payload),
            "headers": dict(JSON_HEADERS),
        }

    return handler


def _build_default_handler():
    settings = load_settings()
    configure_logging(settings.log_level)
    return make_handler(QuizService(settings, GeminiGenerator.from_settings(settings)))


# platform entry point, configured once per cold start
handler = _build_default_handler()
