# errors.py
from typing import Any, Dict


class QuizError(Exception):
    """Base for every failure that reaches the caller as a JSON error payload."""

    message = "Failed to generate quiz questions."

    def diagnostics(self) -> Dict[str, Any]:
        return {}


class ConfigurationError(QuizError):
    message = "Server Error: API key not configured."


class GenerationParseError(QuizError):
    message = "Failed to parse AI response. It might not have returned valid JSON. Try generating again."

    def __init__(self, raw_text: str, reason: str = ""):
        super().__init__(reason or "AI response is not valid JSON")
        self.raw_text = raw_text

    def diagnostics(self):
        return {"rawResponse": self.raw_text}


class ShapeValidationError(QuizError):
    message = "AI generated questions in an unexpected format. Please try again."

    def __init__(self, data: Any):
        super().__init__("parsed AI response does not match the question shape")
        self.data = data

    def diagnostics(self):
        return {"generatedData": self.data}


class GeneratorError(QuizError):
    # wraps whatever the external call raised
    def __init__(self, details: str):
        super().__init__(details)
        self.details = details

    def diagnostics(self):
        return {"details": self.details}
