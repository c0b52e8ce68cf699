"""
messages.py
======================

画面に表示する文言の言語別テーブル。
既定はロシア語（ru）。未知の言語コードは ru にフォールバックする。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

DEFAULT_LANGUAGE = "ru"


@dataclass(frozen=True)
class Messages:
    app_title: str
    app_subtitle: str
    loading_quizzes: str
    no_quizzes: str
    quiz_card_hint: str
    back_to_list: str
    loading_quiz: str
    submit: str
    reload: str
    result_title: str
    result_text: str  # {correct}, {total}
    result_hint: str
    error_load_quizzes: str
    error_load_quiz: str
    error_no_answer: str

    def format_result(self, correct: int, total: int) -> str:
        return self.result_text.format(correct=correct, total=total)


MESSAGES: Dict[str, Messages] = {
    "ru": Messages(
        app_title="Викторины",
        app_subtitle="Пройдите короткий тест и проверьте себя",
        loading_quizzes="Загрузка списка викторин...",
        no_quizzes="Пока нет доступных викторин.",
        quiz_card_hint="Нажмите, чтобы начать",
        back_to_list="← Назад к списку",
        loading_quiz="Загрузка викторины...",
        submit="Отправить ответы",
        reload="Обновить",
        result_title="Результаты",
        result_text="Вы ответили правильно на **{correct} из {total}** вопросов.",
        result_hint="Зелёным отмечены правильные ответы, красным — неверно выбранные.",
        error_load_quizzes="Не удалось загрузить список викторин. Попробуйте позже.",
        error_load_quiz="Не удалось загрузить викторину. Попробуйте позже.",
        error_no_answer="Пожалуйста, выберите хотя бы один вариант ответа.",
    ),
    "en": Messages(
        app_title="Quizzes",
        app_subtitle="Take a short test and check yourself",
        loading_quizzes="Loading quizzes...",
        no_quizzes="No quizzes available yet.",
        quiz_card_hint="Tap to start",
        back_to_list="← Back to list",
        loading_quiz="Loading quiz...",
        submit="Submit answers",
        reload="Reload",
        result_title="Results",
        result_text="You answered **{correct} of {total}** questions correctly.",
        result_hint="Correct answers are marked green, wrong picks are marked red.",
        error_load_quizzes="Could not load the quiz list. Please try again later.",
        error_load_quiz="Could not load the quiz. Please try again later.",
        error_no_answer="Please select at least one answer.",
    ),
    "ja": Messages(
        app_title="クイズ",
        app_subtitle="短いテストで理解度をチェックしましょう",
        loading_quizzes="クイズ一覧を読み込み中...",
        no_quizzes="利用できるクイズはまだありません。",
        quiz_card_hint="タップして開始",
        back_to_list="← 一覧に戻る",
        loading_quiz="クイズを読み込み中...",
        submit="回答を送信",
        reload="再読み込み",
        result_title="結果",
        result_text="**{total} 問中 {correct} 問**正解しました。",
        result_hint="緑が正解、赤が誤って選んだ選択肢です。",
        error_load_quizzes="クイズ一覧を取得できませんでした。しばらくしてからお試しください。",
        error_load_quiz="クイズを取得できませんでした。しばらくしてからお試しください。",
        error_no_answer="少なくとも 1 つ選択肢を選んでください。",
    ),
}


def get_messages(language: str = DEFAULT_LANGUAGE) -> Messages:
    return MESSAGES.get((language or "").lower(), MESSAGES[DEFAULT_LANGUAGE])
