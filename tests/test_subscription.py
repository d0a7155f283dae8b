import json

import pytest


@pytest.mark.parametrize("body", [{}, {"email": ""}, {"email": None}, {"name": "x"}])
def test_subscribe_requires_email(client, graph, body):
    response = client.post("/subscribe", json=body)

    assert response.status_code == 400
    assert response.get_json() == {"error": "Email is required"}
    assert graph.requests == []


def test_subscribe_without_json_body(client, graph):
    response = client.post("/subscribe", data="email=a@b.com", content_type="application/x-www-form-urlencoded")

    assert response.status_code == 400
    assert graph.requests == []


def test_subscribe_creates_item(client, graph):
    response = client.post("/subscribe", json={"email": "ada@example.com"})

    assert response.status_code == 200
    assert response.get_json() == {"id": "1", "fields": {"Title": "ada@example.com"}}

    assert len(graph.token_requests) == 1
    [create] = graph.create_requests
    assert create.url.path == "/v1.0/sites/site-1/lists/subscribers/items"
    assert create.headers["Authorization"] == "Bearer token-123"
    assert json.loads(create.content) == {"fields": {"Title": "ada@example.com"}}


def test_subscribe_token_failure(client, graph):
    graph.token_status = 401

    response = client.post("/subscribe", json={"email": "ada@example.com"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "AADSTS7000215: Invalid client secret provided."}
    assert graph.list_requests == []


def test_subscribe_list_failure(client, graph):
    graph.fail_create_at = 0

    response = client.post("/subscribe", json={"email": "ada@example.com"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "Request failed with status code 503"}
