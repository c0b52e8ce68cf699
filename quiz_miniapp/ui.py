"""
ui.py
======================

Streamlit ベースの UI コンポーネントをまとめたモジュール。

責務:
- Telegram のミニアプリ枠（スマートフォン幅）を想定したレイアウトとスタイル
- ヘッダー・エラーバナー
- クイズ一覧 / クイズ画面 / 結果カードの描画
- ボタン操作を QuizSession のメソッドにつなぐ

状態の変更はすべて session.py 側で行い、ここでは「見た目」と
「どの操作がどのメソッドを呼ぶか」だけを扱う。
"""

from __future__ import annotations

import html
import re
from typing import Dict, Literal, Mapping

import streamlit as st

from .api import QuizApiClient
from .host import HostChannel
from .models import Question, QuestionId
from .session import QuizSession

OptionState = Literal["default", "selected", "correct", "incorrect", "disabled"]

# ----------------------------------------------------------------------
#  テーマ定義
# ----------------------------------------------------------------------


THEMES: Dict[str, Dict[str, str]] = {
    "light": {
        "bg": "#ffffff",
        "text": "#1c1c1e",
        "muted": "#8e8e93",
        "surface": "#f2f2f7",
        "surface_alt": "#ffffff",
        "border": "#d1d1d6",
        "primary": "#007aff",
        "correct": "#34c759",
        "incorrect": "#ff3b30",
    },
    "dark": {
        "bg": "#000000",
        "text": "#f5f5f7",
        "muted": "#98989d",
        "surface": "#1c1c1e",
        "surface_alt": "#2c2c2e",
        "border": "#3a3a3c",
        "primary": "#0a84ff",
        "correct": "#30d158",
        "incorrect": "#ff453a",
    },
    "blue": {
        "bg": "#f5f9ff",
        "text": "#0a1a2f",
        "muted": "#5b6b80",
        "surface": "#e8f0ff",
        "surface_alt": "#ffffff",
        "border": "#c9d6e8",
        "primary": "#0066cc",
        "correct": "#1f9d55",
        "incorrect": "#d64545",
    },
}

OPTION_MARKS: Dict[str, str] = {
    "default": "",
    "selected": "🔘 ",
    "correct": "✅ ",
    "incorrect": "❌ ",
    "disabled": "",
}


# ----------------------------------------------------------------------
#  CSS 生成
# ----------------------------------------------------------------------
def generate_css(theme: Dict[str, str]) -> str:
    """テーマに応じたグローバル CSS を生成する。"""

    return f"""
    <style>
    html, body {{
        -webkit-text-size-adjust: 100%;
        touch-action: manipulation;
    }}

    .stApp {{
        background: {theme['bg']};
        color: {theme['text']};
    }}

    .qm-header {{
        margin-bottom: 0.75rem;
    }}

    .qm-title {{
        font-weight: 700;
        font-size: 1.4rem;
        color: {theme['text']};
        margin: 0;
    }}

    .qm-subtitle {{
        color: {theme['muted']};
        font-size: 0.9rem;
        margin: 0.2rem 0 0 0;
    }}

    .qm-alert-error {{
        padding: 0.75rem 0.9rem;
        border-radius: 10px;
        border: 1px solid {theme['incorrect']};
        background: {theme['incorrect']}1a;
        color: {theme['text']};
        margin-bottom: 0.75rem;
    }}

    .qm-muted {{
        color: {theme['muted']};
    }}

    .qm-quiz-title {{
        font-size: 1.2rem;
        font-weight: 600;
        margin: 0.75rem 0 0.5rem 0;
    }}

    .qm-question-text {{
        background: {theme['surface_alt']};
        color: {theme['text']};
        padding: 0.8rem 0.9rem;
        border-radius: 12px;
        border: 1px solid {theme['border']};
        line-height: 1.5;
        margin: 0.75rem 0 0.4rem 0;
    }}

    .qm-question-index {{
        font-weight: 600;
        color: {theme['primary']};
    }}

    .qm-result-card {{
        padding: 0.9rem;
        border-radius: 12px;
        border: 1px solid {theme['primary']};
        background: {theme['primary']}11;
        margin-top: 0.75rem;
    }}

    .qm-result-title {{
        font-weight: 600;
        margin-bottom: 0.3rem;
    }}

    .qm-result-hint {{
        color: {theme['muted']};
        font-size: 0.85rem;
        margin-top: 0.4rem;
    }}
    </style>
    """


def resolve_theme(theme_key: str) -> Dict[str, str]:
    return THEMES.get(theme_key, THEMES["light"])


# ----------------------------------------------------------------------
#  選択肢の表示状態
# ----------------------------------------------------------------------
def option_state(
    question: Question,
    index: int,
    answers: Mapping[QuestionId, int],
    submitted: bool,
) -> OptionState:
    """
    選択肢 1 つ分の表示状態を返す。

    提出前:  選択中なら selected
    提出後:  正解は correct、誤って選んだものは incorrect、それ以外は disabled
    """
    is_selected = answers.get(question.id) == index
    if submitted:
        if index == question.correct_option:
            return "correct"
        if is_selected:
            return "incorrect"
        return "disabled"
    return "selected" if is_selected else "default"


def option_label(text: str, state: OptionState) -> str:
    return f"{OPTION_MARKS.get(state, '')}{text}"


def option_key(question_id: QuestionId, index: int) -> str:
    return f"qm_opt_{question_id}_{index}"


def option_css(key: str, state: OptionState, theme: Dict[str, str]) -> str:
    """
    選択肢ボタン 1 つ分の色付け CSS。

    Streamlit はキー付きウィジェットのコンテナに st-key-<key> クラスを付けるので、
    それを使って正解（緑）・不正解（赤）・無効（グレー）を塗り分ける。
    """
    if state == "correct":
        color = theme["correct"]
    elif state == "incorrect":
        color = theme["incorrect"]
    elif state == "disabled":
        return (
            f".{_key_class(key)} button {{"
            f" background: {theme['surface']} !important;"
            f" border-color: {theme['border']} !important;"
            f" color: {theme['muted']} !important; }}"
        )
    else:
        return ""
    return (
        f".{_key_class(key)} button {{"
        f" background: {color}22 !important;"
        f" border-color: {color} !important;"
        f" color: {theme['text']} !important; }}"
    )


def _key_class(key: str) -> str:
    # フロントエンド側と同じく、クラス名に使えない文字は "-" に置き換わる
    return "st-key-" + re.sub(r"[^a-zA-Z0-9_-]", "-", key)


# ----------------------------------------------------------------------
#  共通パーツ
# ----------------------------------------------------------------------
def render_header(session: QuizSession, theme_key: str = "light") -> None:
    st.markdown(generate_css(resolve_theme(theme_key)), unsafe_allow_html=True)
    msgs = session.messages
    st.markdown(
        "<div class='qm-header'>"
        f"<h1 class='qm-title'>{html.escape(msgs.app_title)}</h1>"
        f"<p class='qm-subtitle'>{html.escape(msgs.app_subtitle)}</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_error_banner(session: QuizSession) -> None:
    if not session.error:
        return
    st.markdown(
        f"<div class='qm-alert-error'>{html.escape(session.error)}</div>",
        unsafe_allow_html=True,
    )


def _muted(text: str) -> None:
    st.markdown(f"<p class='qm-muted'>{html.escape(text)}</p>", unsafe_allow_html=True)


# ----------------------------------------------------------------------
#  一覧画面
# ----------------------------------------------------------------------
def render_quiz_list(session: QuizSession, client: QuizApiClient) -> None:
    msgs = session.messages

    if not session.quizzes_requested:
        with st.spinner(msgs.loading_quizzes):
            session.load_quizzes(client)
        st.rerun()

    if session.loading_quizzes:
        _muted(msgs.loading_quizzes)
        return

    if session.error:
        st.button(
            msgs.reload,
            key="qm_reload",
            on_click=session.load_quizzes,
            args=(client,),
        )

    if not session.quizzes:
        _muted(msgs.no_quizzes)
        return

    for quiz in session.quizzes:
        st.button(
            f"**{quiz.title}**  \n{msgs.quiz_card_hint}",
            key=f"qm_quiz_{quiz.id}",
            use_container_width=True,
            on_click=session.begin_detail_load,
            args=(quiz.id,),
        )


# ----------------------------------------------------------------------
#  クイズ画面
# ----------------------------------------------------------------------
def render_quiz(
    session: QuizSession,
    client: QuizApiClient,
    channel: HostChannel,
    theme_key: str = "light",
) -> None:
    msgs = session.messages

    st.button(msgs.back_to_list, key="qm_back", on_click=session.back_to_list)

    if session.phase == "detail_loading":
        ticket = session.detail_ticket
        with st.spinner(msgs.loading_quiz):
            session.fetch_detail(client, ticket)
        st.rerun()

    detail = session.quiz_data
    if detail is None:
        return

    st.markdown(
        f"<div class='qm-quiz-title'>{html.escape(detail.quiz.title)}</div>",
        unsafe_allow_html=True,
    )

    for number, question in enumerate(detail.questions, start=1):
        _render_question(session, question, number, resolve_theme(theme_key))

    if not session.submitted:
        st.button(
            msgs.submit,
            key="qm_submit",
            type="primary",
            use_container_width=True,
            on_click=session.submit,
            args=(channel,),
        )
    elif session.result is not None:
        render_result_card(session)


def _render_question(
    session: QuizSession,
    question: Question,
    number: int,
    theme: Dict[str, str],
) -> None:
    st.markdown(
        "<div class='qm-question-text'>"
        f"<span class='qm-question-index'>{number}.</span> {html.escape(question.text)}"
        "</div>",
        unsafe_allow_html=True,
    )

    states = [
        option_state(question, idx, session.answers, session.submitted)
        for idx in range(len(question.options))
    ]
    rules = [option_css(option_key(question.id, idx), state, theme) for idx, state in enumerate(states)]
    rules = [r for r in rules if r]
    if rules:
        st.markdown("<style>" + "\n".join(rules) + "</style>", unsafe_allow_html=True)

    for idx, (text, state) in enumerate(zip(question.options, states)):
        st.button(
            option_label(text, state),
            key=option_key(question.id, idx),
            type="primary" if state == "selected" else "secondary",
            disabled=session.submitted,
            use_container_width=True,
            on_click=session.select_option,
            args=(question.id, idx),
        )


def render_result_card(session: QuizSession) -> None:
    msgs = session.messages
    result = session.result
    if result is None:
        return
    with st.container():
        st.markdown(
            f"<div class='qm-result-card'><div class='qm-result-title'>"
            f"{html.escape(msgs.result_title)}</div></div>",
            unsafe_allow_html=True,
        )
        st.markdown(msgs.format_result(result.correct, result.total))
        st.markdown(
            f"<p class='qm-result-hint'>{html.escape(msgs.result_hint)}</p>",
            unsafe_allow_html=True,
        )


# ----------------------------------------------------------------------
#  公開 API: ページ全体
# ----------------------------------------------------------------------
def render_app(
    session: QuizSession,
    client: QuizApiClient,
    channel: HostChannel,
    *,
    theme_key: str = "light",
) -> None:
    """ヘッダー・バナー・一覧/クイズのどちらか一方を描画する。"""
    render_header(session, theme_key)
    render_error_banner(session)

    if session.view == "list":
        render_quiz_list(session, client)
    else:
        render_quiz(session, client, channel, theme_key)

    channel.render()
