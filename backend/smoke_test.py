#!/usr/bin/env python3
"""Call Gemini once and print the parsed quiz questions.

Usage:
    python smoke_test.py
    python smoke_test.py --category history --count 2 --difficulty hard
"""

import argparse
import json
import sys
from typing import get_args

from config import configure_logging, load_settings
from errors import QuizError
from llm import GeminiGenerator
from quiz import QuizService, normalize_request
from schemas import Difficulty


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate quiz questions once against the live API")
    parser.add_argument("--category", default="history", help="Quiz topic")
    parser.add_argument("--count", default="2", help="Number of questions")
    parser.add_argument("--difficulty", default="any", choices=list(get_args(Difficulty)))
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging("DEBUG")
    if not settings.has_api_key:
        print("API key is not set. Please check your .env file.", file=sys.stderr)
        return 1

    service = QuizService(settings, GeminiGenerator.from_settings(settings))
    req = normalize_request({"category": args.category, "numQuestions": args.count,
                             "difficulty": args.difficulty})

    print(f"Calling Gemini API with {settings.model_name}...")
    try:
        questions = service.generate(req)
    except QuizError as e:
        print(f"Error during test: {e.message} {json.dumps(e.diagnostics(), default=str)}", file=sys.stderr)
        return 1

    print("Parsed quiz questions:")
    print(json.dumps(questions, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
