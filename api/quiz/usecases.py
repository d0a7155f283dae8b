import logging
from typing import Any, Dict, List

from config.settings import Settings
from services import ListService, TokenService
from shared.errors import DuplicateResourceError
from .schemas import AnswerSubmission, StudentDetailsRequest
from .utils import answer_fields, format_questions, student_email_filter, student_fields

logger = logging.getLogger(__name__)


async def get_quiz_questions(
    settings: Settings,
    token_service: TokenService,
    list_service: ListService,
) -> List[dict]:
    token = await token_service.acquire_token()
    items = await list_service.list_items(token, settings.QUIZ_LIST_ID, expand_fields=True)

    questions = format_questions(items)
    logger.info(f"Retrieved {len(questions)} quiz questions")
    return questions


async def submit_student_details(
    body: StudentDetailsRequest,
    settings: Settings,
    token_service: TokenService,
    list_service: ListService,
) -> Dict[str, Any]:
    """
    Register a student for the quiz

    The duplicate check and the insert are two separate calls; two concurrent
    submissions with the same email can both pass the check.

    Raises:
        DuplicateResourceError: If a student with this email already exists
    """
    token = await token_service.acquire_token()

    existing = await list_service.query_items(
        token, settings.STUDENT_LIST_ID, student_email_filter(body.email)
    )
    if existing:
        logger.info(f"Rejected duplicate student registration ({len(existing)} existing)")
        raise DuplicateResourceError("Email already exists. You cannot take the quiz twice.")

    created = await list_service.create_item(
        token, settings.STUDENT_LIST_ID, student_fields(body.fullName, body.email)
    )
    logger.info(f"Student item created: {created.get('id')}")
    return created


async def submit_answers(
    body: AnswerSubmission,
    settings: Settings,
    token_service: TokenService,
    list_service: ListService,
) -> int:
    """
    Insert one answer item per submitted answer, in order

    Stops at the first failure. Items inserted before it stay in the list.
    """
    token = await token_service.acquire_token()

    for index, answer in enumerate(body.answers):
        logger.debug(f"Submitting answer {index + 1}/{len(body.answers)} for question {answer.questionId}")
        await list_service.create_item(token, settings.ANSWER_LIST_ID, answer_fields(body.email, answer))

    logger.info(f"Submitted {len(body.answers)} answers")
    return len(body.answers)
