"""Tests for the quiz API client."""

from __future__ import annotations

import httpx
import pytest

from conftest import BASE_URL, QUIZ_DETAIL, json_response, make_client
from quiz_miniapp.api import QuizApiClient, QuizApiError


def test_list_quizzes(api_client):
    quizzes = api_client.list_quizzes()
    assert [(q.id, q.title) for q in quizzes] == [(1, "Capitals"), (2, "Rivers")]


def test_list_quizzes_without_key_is_empty():
    client = make_client({"/api/quizzes": json_response({})})
    assert client.list_quizzes() == []


def test_list_quizzes_null_is_empty():
    client = make_client({"/api/quizzes": json_response({"quizzes": None})})
    assert client.list_quizzes() == []


def test_get_quiz(api_client):
    detail = api_client.get_quiz(1)
    assert detail.quiz.title == "Capitals"
    assert [q.correct_option for q in detail.questions] == [1, 0, 2]
    assert detail.questions[0].options == ["Lyon", "Paris", "Nice"]


def test_get_quiz_requests_detail_path():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=QUIZ_DETAIL)

    client = QuizApiClient(BASE_URL + "/", transport=httpx.MockTransport(handler))
    client.get_quiz(1)
    assert seen == [f"{BASE_URL}/api/quizzes/1"]


def test_http_error_status_is_wrapped():
    client = make_client({"/api/quizzes": json_response({"detail": "boom"}, status=500)})
    with pytest.raises(QuizApiError) as exc_info:
        client.list_quizzes()
    assert exc_info.value.status_code == 500


def test_missing_quiz_is_wrapped(api_client):
    with pytest.raises(QuizApiError) as exc_info:
        api_client.get_quiz(42)
    assert exc_info.value.status_code == 404


def test_transport_error_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = QuizApiClient(BASE_URL, transport=httpx.MockTransport(handler))
    with pytest.raises(QuizApiError) as exc_info:
        client.list_quizzes()
    assert exc_info.value.status_code is None


def test_invalid_json_is_wrapped():
    client = make_client({"/api/quizzes": lambda request: httpx.Response(200, content=b"<html>")})
    with pytest.raises(QuizApiError):
        client.list_quizzes()


def test_malformed_detail_is_wrapped():
    client = make_client({"/api/quizzes/1": json_response({"quiz": {"id": 1, "title": "x"}})})
    with pytest.raises(QuizApiError):
        client.get_quiz(1)


def test_invalid_url_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.InvalidURL("Invalid port: '99999'")

    client = QuizApiClient(BASE_URL, transport=httpx.MockTransport(handler))
    with pytest.raises(QuizApiError) as exc_info:
        client.list_quizzes()
    assert exc_info.value.status_code is None
