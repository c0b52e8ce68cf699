"""
session.py
======================

1 ブラウザセッション分のクイズ状態と、その状態遷移。

Streamlit の st.session_state に QuizSession を 1 つ保持し、
UI からはここのメソッドだけを呼ぶ。Streamlit には依存しない。

状態遷移:

    idle(一覧) → detail_loading → detail_ready → answering ⇄ answering
        → submitted → (一覧に戻る) → idle

- 一覧表示とクイズ表示は selected_quiz_id の有無で排他
- submitted=True 以降は answers を変更しない
- 詳細の読み込みはチケット番号で管理し、古いレスポンスは捨てる
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional

from .api import QuizApiClient, QuizApiError
from .host import HostChannel
from .messages import Messages, get_messages
from .models import QuestionId, Quiz, QuizDetail, QuizId, QuizResult
from .scoring import build_result_payload, calculate_result, has_any_answer

logger = logging.getLogger(__name__)

Phase = Literal[
    "idle",
    "detail_loading",
    "detail_error",
    "detail_ready",
    "answering",
    "submitted",
]


@dataclass
class QuizSession:
    messages: Messages = field(default_factory=get_messages)

    # 一覧
    quizzes: List[Quiz] = field(default_factory=list)
    loading_quizzes: bool = True
    quizzes_requested: bool = False

    # 選択中のクイズ
    selected_quiz_id: Optional[QuizId] = None
    quiz_data: Optional[QuizDetail] = None
    loading_quiz: bool = False

    # 回答・結果
    answers: Dict[QuestionId, int] = field(default_factory=dict)
    submitted: bool = False
    result: Optional[QuizResult] = None

    # 画面上部のエラーバナー（空文字なら非表示）
    error: str = ""

    _detail_ticket: int = 0

    # ------------------------------------------------------------------
    # 状態参照
    # ------------------------------------------------------------------
    @property
    def view(self) -> Literal["list", "quiz"]:
        return "list" if self.selected_quiz_id is None else "quiz"

    @property
    def phase(self) -> Phase:
        if self.selected_quiz_id is None:
            return "idle"
        if self.submitted:
            return "submitted"
        if self.quiz_data is None:
            return "detail_loading" if self.loading_quiz else "detail_error"
        if self.answers:
            return "answering"
        return "detail_ready"

    # ------------------------------------------------------------------
    # 一覧の読み込み
    # ------------------------------------------------------------------
    def load_quizzes(self, client: QuizApiClient) -> None:
        """一覧を取得する。失敗時はバナーを出し、以前の一覧はそのまま残す。"""
        self.quizzes_requested = True
        self.loading_quizzes = True
        self.error = ""
        try:
            self.quizzes = client.list_quizzes()
        except QuizApiError:
            logger.exception("Failed to load quiz list")
            self.error = self.messages.error_load_quizzes
        finally:
            self.loading_quizzes = False

    # ------------------------------------------------------------------
    # クイズ詳細の読み込み
    # ------------------------------------------------------------------
    def begin_detail_load(self, quiz_id: QuizId) -> int:
        """
        クイズ単位の状態をリセットして読み込み中にする。
        戻り値のチケットを finish_detail_load / fail_detail_load に渡す。
        """
        self._detail_ticket += 1
        self.selected_quiz_id = quiz_id
        self.quiz_data = None
        self.answers = {}
        self.submitted = False
        self.result = None
        self.loading_quiz = True
        self.error = ""
        return self._detail_ticket

    def finish_detail_load(self, ticket: int, detail: QuizDetail) -> bool:
        if ticket != self._detail_ticket:
            logger.info("Dropping stale quiz detail response (ticket %d)", ticket)
            return False
        self.quiz_data = detail
        self.loading_quiz = False
        return True

    def fail_detail_load(self, ticket: int) -> bool:
        if ticket != self._detail_ticket:
            return False
        self.error = self.messages.error_load_quiz
        self.loading_quiz = False
        return True

    @property
    def detail_ticket(self) -> int:
        return self._detail_ticket

    def fetch_detail(self, client: QuizApiClient, ticket: int) -> None:
        """begin_detail_load() 済みのクイズを取得して反映する。"""
        quiz_id = self.selected_quiz_id
        try:
            detail = client.get_quiz(quiz_id)
        except QuizApiError:
            logger.exception("Failed to load quiz %r", quiz_id)
            self.fail_detail_load(ticket)
            return
        self.finish_detail_load(ticket, detail)

    # ------------------------------------------------------------------
    # 回答
    # ------------------------------------------------------------------
    def select_option(self, question_id: QuestionId, option_index: int) -> bool:
        """回答を記録する。提出後は何もしない。"""
        if self.submitted:
            return False
        self.answers[question_id] = option_index
        return True

    def submit(self, channel: HostChannel) -> bool:
        """
        採点してホストに結果を送る。

        - 1 問も回答していなければバナーを出して中断（submitted は変えない）
        - ホストへの送信失敗はログのみ。ローカルの採点結果はそのまま有効
        """
        if self.quiz_data is None:
            return False

        questions = self.quiz_data.questions
        if not has_any_answer(questions, self.answers):
            self.error = self.messages.error_no_answer
            return False

        self.result = calculate_result(questions, self.answers)
        self.submitted = True
        self.error = ""

        payload = build_result_payload(self.quiz_data, self.answers)
        try:
            channel.send_data(json.dumps(payload, ensure_ascii=False))
        except Exception:
            logger.exception("Failed to send quiz result to host")
        return True

    # ------------------------------------------------------------------
    # 一覧に戻る
    # ------------------------------------------------------------------
    def back_to_list(self) -> None:
        # 読み込み途中のレスポンスも無効にする
        self._detail_ticket += 1
        self.selected_quiz_id = None
        self.quiz_data = None
        self.loading_quiz = False
        self.answers = {}
        self.submitted = False
        self.result = None
        self.error = ""
