"""
Outbound services

Usage:
    from services import TokenService, ListService

    token = await token_service.acquire_token()
    items = await list_service.list_items(token, settings.QUIZ_LIST_ID)
"""
from .token_service import TokenService
from .list_service import ListService, quote_odata

__all__ = ['TokenService', 'ListService', 'quote_odata']
