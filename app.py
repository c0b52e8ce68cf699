"""
app.py
======================

クイズ・ミニアプリ（Streamlit）エントリーポイント。

特徴:
- クイズ一覧 → クイズ → 結果 の 1 ページ構成
- 問題と正解は API（GET /api/quizzes, GET /api/quizzes/:id）から取得
- 採点はローカルで行い、結果は Telegram WebApp の sendData() でボットへ返す
- Telegram の外（ブラウザ単体）でも動作し、その場合は結果をログに出すだけ

起動:
    streamlit run app.py

Telegram のボット側では WebApp ボタンの URL に ?host=telegram を付けておく。
"""

from __future__ import annotations

import logging
from typing import Optional

import streamlit as st

from quiz_miniapp.api import QuizApiClient
from quiz_miniapp.config import AppConfig
from quiz_miniapp.host import HostChannel, detect_host_channel
from quiz_miniapp.logs import configure_logging
from quiz_miniapp.messages import get_messages
from quiz_miniapp.session import QuizSession
from quiz_miniapp.ui import render_app

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
#  設定・クライアント（プロセス内で共有）
# ----------------------------------------------------------------------
@st.cache_resource(show_spinner=False)
def load_app_config() -> AppConfig:
    cfg = AppConfig()
    configure_logging(cfg.log_level)
    logger.info("Quiz API base URL: %s", cfg.api_base_url)
    return cfg


@st.cache_resource(show_spinner=False)
def get_api_client(base_url: str, timeout: Optional[float]) -> QuizApiClient:
    return QuizApiClient(base_url, timeout=timeout)


# ----------------------------------------------------------------------
#  セッション単位の状態
# ----------------------------------------------------------------------
def get_host_channel(cfg: AppConfig) -> HostChannel:
    """ホストチャネルはセッション開始時に 1 回だけ決め、ready()/expand() を呼ぶ。"""
    if "host_channel" not in st.session_state:
        channel = detect_host_channel(cfg.host_channel, st.query_params.to_dict())
        channel.start()
        st.session_state["host_channel"] = channel
    return st.session_state["host_channel"]


def get_quiz_session(cfg: AppConfig) -> QuizSession:
    if "quiz_session" not in st.session_state:
        st.session_state["quiz_session"] = QuizSession(messages=get_messages(cfg.language))
    return st.session_state["quiz_session"]


# ----------------------------------------------------------------------
#  メイン
# ----------------------------------------------------------------------
def main() -> None:
    cfg = load_app_config()
    messages = get_messages(cfg.language)

    st.set_page_config(
        page_title=messages.app_title,
        page_icon="📝",
        layout="centered",
    )

    client = get_api_client(cfg.api_base_url, cfg.request_timeout)
    channel = get_host_channel(cfg)
    session = get_quiz_session(cfg)

    render_app(session, client, channel, theme_key=cfg.theme)


if __name__ == "__main__":
    main()
