"""
api.py
===========================

クイズ API（GET /api/quizzes, GET /api/quizzes/:id）のクライアント。

方針:
- HTTP は httpx の同期クライアントで 1 リクエストごとに開閉する
- 2xx 以外・通信エラー・JSON 形式の崩れはすべて QuizApiError に包んで送出する
- リトライ・タイムアウトは既定では行わない（timeout は設定で指定可能）
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from .models import Quiz, QuizDetail, QuizId, parse_quiz_list

logger = logging.getLogger(__name__)

QUIZZES_PATH = "/api/quizzes"


class QuizApiError(Exception):
    """クイズ API の呼び出し失敗。status_code は HTTP 応答があった場合のみ入る。"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class QuizApiClient:
    """
    クイズ API クライアント。

    transport はテスト用（httpx.MockTransport を渡す）。
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    # ------------------------------------------------------------
    # 公開 API
    # ------------------------------------------------------------
    def list_quizzes(self) -> List[Quiz]:
        data = self._get_json(QUIZZES_PATH)
        try:
            return parse_quiz_list(data)
        except (TypeError, ValueError) as e:
            raise QuizApiError(f"malformed quiz list: {e}") from e

    def get_quiz(self, quiz_id: QuizId) -> QuizDetail:
        data = self._get_json(f"{QUIZZES_PATH}/{quote(str(quiz_id), safe='')}")
        try:
            return QuizDetail.from_dict(data)
        except (TypeError, ValueError) as e:
            raise QuizApiError(f"malformed quiz {quiz_id!r}: {e}") from e

    # ------------------------------------------------------------
    # 内部関数
    # ------------------------------------------------------------
    def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise QuizApiError(f"GET {path} returned HTTP {status}", status_code=status) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise QuizApiError(f"GET {path} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise QuizApiError(
                f"GET {path} returned invalid JSON", status_code=response.status_code
            ) from e
