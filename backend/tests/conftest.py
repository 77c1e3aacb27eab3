import json

import pytest

from config import Settings
from quiz import QuizService

VALID_QUESTIONS = [
    {
        "question": "Who was the first Roman emperor?",
        "options": ["Julius Caesar", "Augustus", "Nero", "Tiberius"],
        "correct_answer_index": 1,
    },
    {
        "question": "In which year did the Berlin Wall fall?",
        "options": ["1987", "1988", "1989", "1990"],
        "correct_answer_index": 2,
    },
]


class FakeGenerator:
    """Records prompts and returns canned text, or raises a canned error."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text

    def ping(self):
        return {"ok": True, "model": "fake", "content": "OK"}


@pytest.fixture
def settings():
    return Settings(api_key="test-key", prompt_nonce=False)


@pytest.fixture
def valid_questions():
    return json.loads(json.dumps(VALID_QUESTIONS))


@pytest.fixture
def make_service(settings):
    def _make(text="", error=None, settings=settings):
        generator = FakeGenerator(text=text, error=error)
        return QuizService(settings, generator), generator
    return _make
