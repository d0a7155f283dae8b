import json


def quiz_item(item_id, title, options, correct):
    fields = {"Title": title, "field_5": correct}
    for index, option in enumerate(options, start=1):
        fields[f"field_{index}"] = option
    return {"id": item_id, "fields": fields}


def test_quiz_projects_items(client, graph):
    graph.items["quiz"] = [
        quiz_item("1", "2 + 2?", ["3", "4", "5", "22"], "4"),
        quiz_item("2", "Capital of France?", ["Paris", "Rome", "Oslo", "Bern"], "Paris"),
        quiz_item("3", "Largest planet?", ["Mars", "Venus", "Jupiter", "Earth"], "Jupiter"),
    ]

    response = client.get("/quiz")

    assert response.status_code == 200
    assert response.get_json() == [
        {"id": "1", "title": "2 + 2?", "optionA": "3", "optionB": "4",
         "optionC": "5", "optionD": "22", "correctAnswer": "4"},
        {"id": "2", "title": "Capital of France?", "optionA": "Paris", "optionB": "Rome",
         "optionC": "Oslo", "optionD": "Bern", "correctAnswer": "Paris"},
        {"id": "3", "title": "Largest planet?", "optionA": "Mars", "optionB": "Venus",
         "optionC": "Jupiter", "optionD": "Earth", "correctAnswer": "Jupiter"},
    ]

    [listing] = graph.list_requests
    assert listing.method == "GET"
    assert listing.url.path == "/v1.0/sites/site-1/lists/quiz/items"
    assert listing.url.params["expand"] == "fields"


def test_quiz_missing_columns_are_null(client, graph):
    graph.items["quiz"] = [{"id": "9", "fields": {"Title": "Unfinished"}}]

    response = client.get("/quiz")

    assert response.get_json() == [{
        "id": "9", "title": "Unfinished", "optionA": None, "optionB": None,
        "optionC": None, "optionD": None, "correctAnswer": None,
    }]


def test_quiz_empty_list(client, graph):
    response = client.get("/quiz")

    assert response.status_code == 200
    assert response.get_json() == []


def test_quiz_downstream_error(client, graph):
    graph.list_get_status = 404

    response = client.get("/quiz")

    assert response.status_code == 500
    assert response.get_json() == {"error": "Request failed with status code 404"}


def test_quiz_requests_new_token_each_time(client, graph):
    client.get("/quiz")
    client.get("/quiz")

    assert len(graph.token_requests) == 2
