import json
from typing import Dict, List, Optional

import httpx
import pytest

from config.settings import Settings
from main import create_app
from services import ListService, TokenService



class FakeGraph:
    """Identity provider and Graph list API behind one MockTransport"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.items: Dict[str, List[dict]] = {}
        self.token_status = 200
        self.list_get_status = 200
        self.fail_create_at: Optional[int] = None
        self.created: List[tuple] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path.endswith("/oauth2/v2.0/token"):
            if self.token_status != 200:
                return httpx.Response(self.token_status, json={
                    "error": "invalid_client",
                    "error_description": "AADSTS7000215: Invalid client secret provided.",
                })
            return httpx.Response(200, json={
                "token_type": "Bearer",
                "expires_in": 3599,
                "access_token": "token-123",
            })

        list_id = request.url.path.split("/lists/")[1].split("/")[0]

        if request.method == "GET":
            if self.list_get_status != 200:
                return httpx.Response(self.list_get_status, json={"error": {"code": "itemNotFound"}})
            return httpx.Response(200, json={"value": self.items.get(list_id, [])})

        fields = json.loads(request.content)["fields"]
        if self.fail_create_at is not None and len(self.created) == self.fail_create_at:
            return httpx.Response(503, json={"error": {"code": "serviceNotAvailable"}})

        self.created.append((list_id, fields))
        return httpx.Response(201, json={"id": str(len(self.created)), "fields": fields})

    @property
    def token_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/token")]

    @property
    def list_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if "/lists/" in r.url.path]

    @property
    def create_requests(self) -> List[httpx.Request]:
        return [r for r in self.list_requests if r.method == "POST"]


@pytest.fixture
def settings():
    settings = Settings()
    settings.ENVIRONMENT = "testing"
    settings.CLIENT_ID = "client-id"
    settings.CLIENT_SECRET = "client-secret"
    settings.TENANT_ID = "tenant-id"
    settings.SITE_ID = "site-1"
    settings.LIST_ID = "subscribers"
    settings.QUIZ_LIST_ID = "quiz"
    settings.STUDENT_LIST_ID = "students"
    settings.ANSWER_LIST_ID = "answers"
    settings.AUTHORITY_HOST = "https://login.microsoftonline.com"
    settings.GRAPH_BASE_URL = "https://graph.microsoft.com/v1.0"
    settings.REQUEST_TIMEOUT = 10
    return settings


@pytest.fixture
def graph():
    return FakeGraph()


@pytest.fixture
def app(settings, graph):
    transport = httpx.MockTransport(graph.handler)
    app = create_app(
        settings=settings,
        token_service=TokenService(settings, transport=transport),
        list_service=ListService(settings, transport=transport),
    )
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
