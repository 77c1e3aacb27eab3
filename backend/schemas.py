# schemas.py
from typing import Any, List, Literal, Optional, Union
from pydantic import BaseModel, Field

Difficulty = Literal["easy", "medium", "hard", "any"]

class QuizRequest(BaseModel):
    category: str = "general knowledge"
    # float only ever carries NaN, when the inbound count has no leading integer
    num_questions: Union[int, float] = 3
    difficulty: str = "any"

class QuizQuestion(BaseModel):
    question: str
    options: List[str] = Field(min_length=4, max_length=4)
    correct_answer_index: Union[int, float] = Field(ge=0, le=3)

class ErrorOut(BaseModel):
    error: str
    rawResponse: Optional[str] = None
    generatedData: Optional[Any] = None
    details: Optional[str] = None
