from flask import request, jsonify

from ..base.base_schemas import parse_body
from ..base.dependencies import get_settings, get_list_service, get_token_service
from shared.async_utils import run_async
from .schemas import SubscriptionRequest
from .usecases import subscribe as subscribe_usecase

from . import subscription_bp


@subscription_bp.route('/subscribe', methods=['POST'])
def subscribe():
    """Subscribe an email address to the mailing list"""
    body = parse_body(SubscriptionRequest, request.get_json(silent=True), "Email is required")
    settings = get_settings()

    result = run_async(
        subscribe_usecase(body, settings, get_token_service(), get_list_service()),
        timeout=settings.REQUEST_TIMEOUT,
    )
    return jsonify(result), 200
