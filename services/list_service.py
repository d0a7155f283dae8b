# services/list_service.py
import logging
from typing import Any, Dict, List, Optional

import httpx

from config.settings import Settings
from shared.errors import ListServiceError

logger = logging.getLogger(__name__)


class ListService:
    """SharePoint list items through Microsoft Graph"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        config = settings.get_list_config()
        self.base_url = config["base_url"]
        self.site_id = config["site_id"]
        self.lists = config["lists"]
        self.timeout = config["timeout"]
        self.transport = transport

        logger.info(f"ListService initialized for site: {self.site_id or 'NOT SET'}")

    def items_url(self, list_id: str) -> str:
        return f"{self.base_url}/sites/{self.site_id}/lists/{list_id}/items"

    async def create_item(self, token: str, list_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create one list item

        Args:
            token: Bearer access token
            list_id: Target list
            fields: Column values for the new item

        Returns:
            The created item as returned by Graph
        """
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        return await self._request("POST", list_id, headers=headers, json={"fields": fields})

    async def list_items(self, token: str, list_id: str, expand_fields: bool = True) -> List[Dict[str, Any]]:
        """Get all items of a list, with column values when expand_fields is set"""
        params = {"expand": "fields"} if expand_fields else None
        data = await self._request("GET", list_id, headers={"Authorization": f"Bearer {token}"}, params=params)
        return data.get("value", [])

    async def query_items(self, token: str, list_id: str, filter_expr: str) -> List[Dict[str, Any]]:
        """Get the items of a list matching an OData filter expression"""
        data = await self._request(
            "GET",
            list_id,
            headers={"Authorization": f"Bearer {token}"},
            params={"filter": filter_expr},
        )
        return data.get("value", [])

    async def _request(self, method: str, list_id: str, **kwargs) -> Dict[str, Any]:
        url = self.items_url(list_id)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} list {list_id} failed: {e}")
            raise ListServiceError(str(e) or e.__class__.__name__) from e

        logger.info(f"{method} list {list_id} -> {response.status_code}")

        if response.is_error:
            logger.error(f"List API error {response.status_code}: {response.text}")
            raise ListServiceError(
                f"Request failed with status code {response.status_code}",
                status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ListServiceError("List API returned invalid JSON", status=response.status_code) from e


def quote_odata(value: str) -> str:
    """Quote a value as an OData string literal"""
    return "'" + value.replace("'", "''") + "'"
