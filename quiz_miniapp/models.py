"""
models.py
======================

クイズ API が返す JSON を表すデータモデル。

- Quiz:        一覧に表示するサマリ (id, title)
- Question:    問題文・選択肢・正解インデックス
- QuizDetail:  /api/quizzes/:id のレスポンス全体
- QuizResult:  ローカルで計算した採点結果（保存はしない）

from_dict() は API のレスポンス形式をそのまま受け取り、
形が崩れている場合は ValueError を送出する（api.py 側で QuizApiError に包む）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

QuizId = Union[int, str]
QuestionId = Union[int, str]


@dataclass(frozen=True)
class Quiz:
    id: QuizId
    title: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quiz":
        if not isinstance(data, dict) or "id" not in data:
            raise ValueError(f"invalid quiz entry: {data!r}")
        return cls(id=data["id"], title=str(data.get("title", "")))


@dataclass(frozen=True)
class Question:
    """
    1 問分のデータ。

    correct_option は options の有効なインデックスである前提（検証はしない）。
    採点と、提出後の正誤表示にだけ使う。
    """

    id: QuestionId
    text: str
    options: List[str] = field(default_factory=list)
    correct_option: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        if not isinstance(data, dict) or "id" not in data:
            raise ValueError(f"invalid question entry: {data!r}")
        options = data.get("options") or []
        if not isinstance(options, list):
            raise ValueError(f"options must be a list: {options!r}")
        return cls(
            id=data["id"],
            text=str(data.get("text", "")),
            options=[str(o) for o in options],
            correct_option=int(data.get("correct_option", 0)),
        )


@dataclass(frozen=True)
class QuizDetail:
    quiz: Quiz
    questions: List[Question] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuizDetail":
        if not isinstance(data, dict) or "quiz" not in data:
            raise ValueError("quiz detail response has no 'quiz' field")
        questions = data.get("questions")
        if not isinstance(questions, list):
            raise ValueError("quiz detail response has no 'questions' list")
        return cls(
            quiz=Quiz.from_dict(data["quiz"]),
            questions=[Question.from_dict(q) for q in questions],
        )


@dataclass(frozen=True)
class QuizResult:
    correct: int
    total: int

    def to_dict(self) -> Dict[str, int]:
        return {"correct": self.correct, "total": self.total}


def parse_quiz_list(data: Any) -> List[Quiz]:
    """
    /api/quizzes のレスポンスから Quiz のリストを作る。
    "quizzes" キーが無い・null の場合は空リスト扱い。
    """
    if not isinstance(data, dict):
        raise ValueError("quiz list response must be a JSON object")
    items = data.get("quizzes") or []
    if not isinstance(items, list):
        raise ValueError("'quizzes' must be a list")
    return [Quiz.from_dict(item) for item in items]
