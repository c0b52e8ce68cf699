"""
quiz_miniapp パッケージ
======================

このパッケージは、チャット内ミニアプリ向けクイズ画面の内部ロジックを提供する。

主な役割:
- 設定管理（config）
- クイズ API クライアント（api）
- データモデル（models）
- 採点・結果ペイロード（scoring）
- ホスト（Telegram WebApp）との連携（host）
- 画面状態と状態遷移（session）
- 表示文言（messages）
- UI コンポーネント（ui）

app.py は Streamlit の起動と組み立てのみを担当し、内部ロジックはすべて本パッケージから呼ぶ。
ui 以外のモジュールは Streamlit に依存しない。
"""

from .api import QuizApiClient, QuizApiError
from .config import AppConfig
from .host import (
    HostChannel,
    LoggingHostChannel,
    TelegramWebAppChannel,
    detect_host_channel,
)
from .messages import Messages, get_messages
from .models import Question, Quiz, QuizDetail, QuizResult
from .scoring import build_result_payload, calculate_result, has_any_answer
from .session import QuizSession

__all__ = [
    "AppConfig",
    "QuizApiClient",
    "QuizApiError",
    "HostChannel",
    "LoggingHostChannel",
    "TelegramWebAppChannel",
    "detect_host_channel",
    "Messages",
    "get_messages",
    "Question",
    "Quiz",
    "QuizDetail",
    "QuizResult",
    "build_result_payload",
    "calculate_result",
    "has_any_answer",
    "QuizSession",
]
