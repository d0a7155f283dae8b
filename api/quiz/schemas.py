# api/quiz/schemas.py
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field

# REQUEST SCHEMAS
class StudentDetailsRequest(BaseModel):
    """Request body for POST /submit-details"""
    fullName: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)

class AnswerItem(BaseModel):
    questionId: Union[str, int]
    selectedAnswer: Union[str, int]

class AnswerSubmission(BaseModel):
    """Request body for POST /submit-answers"""
    email: str = Field(..., min_length=1)
    answers: List[AnswerItem] = Field(..., min_length=1, description="Answers in question order")

# RESPONSE SCHEMAS
class QuizQuestion(BaseModel):
    """One question projected from a quiz list item"""
    id: Optional[Any] = None
    title: Optional[Any] = None
    optionA: Optional[Any] = None
    optionB: Optional[Any] = None
    optionC: Optional[Any] = None
    optionD: Optional[Any] = None
    correctAnswer: Optional[Any] = None
