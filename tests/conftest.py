"""Shared fixtures for quiz mini app tests."""

from __future__ import annotations

import json
from typing import Callable, Dict, List

import httpx
import pytest

from quiz_miniapp.api import QuizApiClient
from quiz_miniapp.host import HostChannel
from quiz_miniapp.messages import get_messages
from quiz_miniapp.models import QuizDetail
from quiz_miniapp.session import QuizSession

BASE_URL = "http://quiz.test"

QUIZ_LIST = {
    "quizzes": [
        {"id": 1, "title": "Capitals"},
        {"id": 2, "title": "Rivers"},
    ]
}

QUIZ_DETAIL = {
    "quiz": {"id": 1, "title": "Capitals"},
    "questions": [
        {"id": 10, "text": "Capital of France?", "options": ["Lyon", "Paris", "Nice"], "correct_option": 1},
        {"id": 11, "text": "Capital of Italy?", "options": ["Rome", "Milan", "Turin"], "correct_option": 0},
        {"id": 12, "text": "Capital of Spain?", "options": ["Seville", "Bilbao", "Madrid"], "correct_option": 2},
    ],
}


class RecordingChannel(HostChannel):
    """Host channel stub that records every call."""

    name = "recording"

    def __init__(self, fail: bool = False):
        self.calls: List[str] = []
        self.sent: List[str] = []
        self.fail = fail

    def ready(self) -> None:
        self.calls.append("ready")

    def expand(self) -> None:
        self.calls.append("expand")

    def send_data(self, data: str) -> None:
        self.calls.append("send_data")
        if self.fail:
            raise RuntimeError("host bridge is gone")
        self.sent.append(data)


def make_client(routes: Dict[str, Callable[[httpx.Request], httpx.Response]]) -> QuizApiClient:
    """Build a client whose requests are answered by ``routes`` keyed by URL path."""

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"detail": "not found"})
        return route(request)

    return QuizApiClient(BASE_URL, transport=httpx.MockTransport(handler))


def json_response(payload, status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, content=json.dumps(payload).encode("utf-8"))


@pytest.fixture
def quiz_detail() -> QuizDetail:
    return QuizDetail.from_dict(QUIZ_DETAIL)


@pytest.fixture
def api_client() -> QuizApiClient:
    return make_client(
        {
            "/api/quizzes": json_response(QUIZ_LIST),
            "/api/quizzes/1": json_response(QUIZ_DETAIL),
        }
    )


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def session() -> QuizSession:
    return QuizSession(messages=get_messages("en"))
