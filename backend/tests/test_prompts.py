import math

from prompts import ANY_DIFFICULTY, DIFFICULTY_DESCRIPTIONS, build_prompt, describe_difficulty
from quiz import normalize_request
from schemas import QuizRequest


def test_defaults_ask_for_three_general_knowledge_questions():
    prompt = build_prompt(normalize_request({}, {}))
    assert 'Generate exactly 3 multiple-choice quiz questions about "general knowledge".' in prompt


def test_prompt_states_count_topic_and_format():
    prompt = build_prompt(QuizRequest(category="history", num_questions=2))
    assert "exactly 2 multiple-choice" in prompt
    assert '"history"' in prompt
    assert "exactly 4 answer options (labeled A, B, C, D)" in prompt
    assert '"correct_answer_index": 0' in prompt
    assert "Just the JSON array." in prompt


def test_difficulty_descriptor_embedded():
    for level, text in DIFFICULTY_DESCRIPTIONS.items():
        assert text in build_prompt(QuizRequest(difficulty=level))
    assert ANY_DIFFICULTY in build_prompt(QuizRequest(difficulty="any"))


def test_unknown_difficulty_falls_back_to_any():
    assert describe_difficulty("impossible") == ANY_DIFFICULTY
    assert describe_difficulty("Hard") == ANY_DIFFICULTY


def test_nonce_is_optional_and_deterministic():
    req = QuizRequest(category="space")
    assert "Timestamp for uniqueness" not in build_prompt(req)
    with_nonce = build_prompt(req, nonce=1700000000000)
    assert with_nonce.endswith("Timestamp for uniqueness: 1700000000000")
    assert with_nonce == build_prompt(req, nonce=1700000000000)


def test_nan_count_flows_into_prompt():
    req = normalize_request({"numQuestions": "lots"})
    assert math.isnan(req.num_questions)
    assert "Generate exactly NaN multiple-choice" in build_prompt(req)
