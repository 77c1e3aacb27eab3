# prompts.py
import math
import os
from typing import Dict, Optional

from schemas import QuizRequest

PROMPT_PATH = os.path.join(os.path.dirname(__file__), "prompts", "quiz_prompt.md")
with open(PROMPT_PATH, "r", encoding="utf-8") as f:
    FORMAT_MD = f.read().strip()

DIFFICULTY_DESCRIPTIONS: Dict[str, str] = {
    "easy": "The questions should be very straightforward, common knowledge, and have obvious correct answers. Avoid obscure topics.",
    "medium": "The questions should require some general knowledge or logical deduction, but not be overly specialized or obscure.",
    "hard": "The questions should be challenging, requiring specific knowledge, nuanced understanding, or more complex problem-solving. Include less common facts.",
}
ANY_DIFFICULTY = "The questions should be of mixed or general difficulty."


def describe_difficulty(difficulty: str) -> str:
    # unknown values are treated as "any"
    return DIFFICULTY_DESCRIPTIONS.get(difficulty, ANY_DIFFICULTY)


def _format_count(n) -> str:
    return "NaN" if isinstance(n, float) and math.isnan(n) else str(n)


def build_prompt(req: QuizRequest, nonce: Optional[int] = None) -> str:
    """
    Renders the single instruction sent to the generator. Same request and nonce
    always give the same text; pass nonce=None to leave the timestamp line out.
    """
    header = (
        f'Generate exactly {_format_count(req.num_questions)} multiple-choice quiz questions about "{req.category}". '
        f"{describe_difficulty(req.difficulty)} "
        "Ensure each question and its options are unique and not repeated from previous requests. "
        "Provide exactly 4 answer options (labeled A, B, C, D) for each question, "
        "and give the correct answer as a zero-based index (0 for A, 1 for B, 2 for C, 3 for D)."
    )
    prompt = f"{header}\n\n{FORMAT_MD}"
    if nonce is not None:
        prompt += f"\nTimestamp for uniqueness: {nonce}"
    return prompt
