"""
scoring.py
======================

採点と提出ペイロードの組み立て（副作用なしの純粋関数のみ）。
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence

from .models import Question, QuestionId, QuizDetail, QuizResult

AnswerMap = Mapping[QuestionId, int]

RESULT_MESSAGE_TYPE = "quiz_result"


def calculate_result(questions: Sequence[Question], answers: AnswerMap) -> QuizResult:
    """
    回答済みかつ correct_option と一致した問題だけを正解として数える。
    total は回答数に関係なく常に問題数。
    """
    correct = 0
    for q in questions:
        selected = answers.get(q.id)
        if selected is not None and selected == q.correct_option:
            correct += 1
    return QuizResult(correct=correct, total=len(questions))


def has_any_answer(questions: Sequence[Question], answers: AnswerMap) -> bool:
    return any(answers.get(q.id) is not None for q in questions)


def build_result_payload(detail: QuizDetail, answers: AnswerMap) -> Dict[str, Any]:
    """
    ホストへ送る結果メッセージ。回答した問題だけを問題順に含める。

    {"type": "quiz_result", "quizId": ..., "answers": [{"questionId": ..., "selectedOption": ...}]}
    """
    return {
        "type": RESULT_MESSAGE_TYPE,
        "quizId": detail.quiz.id,
        "answers": [
            {"questionId": q.id, "selectedOption": answers[q.id]}
            for q in detail.questions
            if answers.get(q.id) is not None
        ],
    }
