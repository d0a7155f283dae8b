from flask import request, jsonify

from ..base.base_schemas import SuccessResponse, parse_body
from ..base.dependencies import get_settings, get_list_service, get_token_service
from shared.async_utils import run_async
from .schemas import AnswerSubmission, StudentDetailsRequest
from .usecases import get_quiz_questions, submit_answers as submit_answers_usecase, submit_student_details

from . import quiz_bp


@quiz_bp.route('/quiz', methods=['GET'])
def get_quiz():
    """Fetch quiz questions"""
    settings = get_settings()
    questions = run_async(
        get_quiz_questions(settings, get_token_service(), get_list_service()),
        timeout=settings.REQUEST_TIMEOUT,
    )
    return jsonify(questions), 200


@quiz_bp.route('/submit-details', methods=['POST'])
def submit_details():
    """Register student details before taking the quiz"""
    body = parse_body(
        StudentDetailsRequest,
        request.get_json(silent=True),
        "Full name and email are required",
    )
    settings = get_settings()

    result = run_async(
        submit_student_details(body, settings, get_token_service(), get_list_service()),
        timeout=settings.REQUEST_TIMEOUT,
    )
    return jsonify(result), 200


@quiz_bp.route('/submit-answers', methods=['POST'])
def submit_answers():
    """Submit quiz answers, one list item per answer"""
    body = parse_body(AnswerSubmission, request.get_json(silent=True), "Email and answers are required")
    settings = get_settings()

    run_async(
        submit_answers_usecase(body, settings, get_token_service(), get_list_service()),
        timeout=settings.REQUEST_TIMEOUT,
    )
    return jsonify(SuccessResponse().model_dump()), 200
