import logging
from typing import Any, Dict

from config.settings import Settings
from services import ListService, TokenService
from .schemas import SubscriptionRequest

logger = logging.getLogger(__name__)


async def subscribe(
    body: SubscriptionRequest,
    settings: Settings,
    token_service: TokenService,
    list_service: ListService,
) -> Dict[str, Any]:
    """Add the email to the subscribers list and return the created item"""
    token = await token_service.acquire_token()
    created = await list_service.create_item(token, settings.LIST_ID, {"Title": body.email})
    logger.info(f"Subscriber item created: {created.get('id')}")
    return created
