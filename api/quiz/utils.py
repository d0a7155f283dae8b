# ============== UTILS ==============
from typing import Any, Dict, List

from services import quote_odata
from .schemas import AnswerItem, QuizQuestion

# Quiz list columns, in the order they map onto a question
OPTION_COLUMNS = ("field_1", "field_2", "field_3", "field_4")
CORRECT_ANSWER_COLUMN = "field_5"


def format_questions(items: List[Dict[str, Any]]) -> List[dict]:
    """Transform raw quiz list items to API format, preserving item order"""
    questions = []

    for item in items:
        fields = item.get("fields") or {}
        option_a, option_b, option_c, option_d = (fields.get(column) for column in OPTION_COLUMNS)

        questions.append(QuizQuestion(
            id=item.get("id"),
            title=fields.get("Title"),
            optionA=option_a,
            optionB=option_b,
            optionC=option_c,
            optionD=option_d,
            correctAnswer=fields.get(CORRECT_ANSWER_COLUMN),
        ).model_dump())

    return questions


def student_email_filter(email: str) -> str:
    """Filter matching student records by email (stored in the Password column)"""
    return f"fields/Password eq {quote_odata(email)}"


def student_fields(full_name: str, email: str) -> Dict[str, Any]:
    return {"Title": full_name, "Password": email}


def answer_fields(email: str, answer: AnswerItem) -> Dict[str, Any]:
    return {
        "Title": email,
        "Answers": answer.questionId,
        "SelectedAnswer": answer.selectedAnswer,
    }
