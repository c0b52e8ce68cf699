"""Tests for the pure helpers of the Streamlit UI module."""

from __future__ import annotations

from quiz_miniapp.messages import get_messages
from quiz_miniapp.models import Question
from quiz_miniapp.ui import (
    THEMES,
    generate_css,
    option_css,
    option_key,
    option_label,
    option_state,
    resolve_theme,
)

QUESTION = Question(id=1, text="2 + 2?", options=["3", "4", "5"], correct_option=1)


def test_option_state_before_submit():
    answers = {1: 2}
    assert option_state(QUESTION, 2, answers, submitted=False) == "selected"
    assert option_state(QUESTION, 1, answers, submitted=False) == "default"
    assert option_state(QUESTION, 0, {}, submitted=False) == "default"


def test_option_state_after_submit_wrong_pick():
    answers = {1: 2}
    assert option_state(QUESTION, 1, answers, submitted=True) == "correct"
    assert option_state(QUESTION, 2, answers, submitted=True) == "incorrect"
    assert option_state(QUESTION, 0, answers, submitted=True) == "disabled"


def test_option_state_after_submit_right_pick_and_unanswered():
    assert option_state(QUESTION, 1, {1: 1}, submitted=True) == "correct"
    assert option_state(QUESTION, 1, {}, submitted=True) == "correct"
    assert option_state(QUESTION, 0, {}, submitted=True) == "disabled"


def test_option_label_marks():
    assert option_label("4", "correct").startswith("✅")
    assert option_label("5", "incorrect").startswith("❌")
    assert option_label("3", "default") == "3"


def test_unknown_theme_falls_back_to_light():
    assert resolve_theme("neon") is THEMES["light"]
    assert THEMES["dark"]["bg"] in generate_css(resolve_theme("dark"))


def test_messages_fallback_and_result_format():
    assert get_messages("xx") is get_messages("ru")
    assert get_messages("EN").format_result(2, 3) == "You answered **2 of 3** questions correctly."


def test_dark_theme_css_sets_page_and_card_colors():
    css = generate_css(THEMES["dark"])
    assert f"background: {THEMES['dark']['bg']};" in css
    card = css.split(".qm-question-text {", 1)[1].split("}", 1)[0]
    assert f"color: {THEMES['dark']['text']};" in card


def test_option_css_uses_theme_colors():
    theme = THEMES["light"]
    key = option_key(1, 2)
    assert key == "qm_opt_1_2"
    assert theme["correct"] in option_css(key, "correct", theme)
    assert ".st-key-qm_opt_1_2 button" in option_css(key, "correct", theme)
    assert theme["incorrect"] in option_css(key, "incorrect", theme)
    assert theme["surface"] in option_css(key, "disabled", theme)
    assert option_css(key, "default", theme) == ""
    assert option_css(key, "selected", theme) == ""


def test_option_css_sanitizes_key():
    css = option_css(option_key("q 1", 0), "correct", THEMES["light"])
    assert ".st-key-qm_opt_q-1_0 button" in css
