"""Quiz questions: parsing, the question list and the fifty-fifty lifeline."""

from __future__ import annotations

import os
import random
from collections.abc import Iterator
from dataclasses import dataclass

from .screen import ANSWER_LETTERS, ERASE, draw_table, goto, help_screen

_ANSWER_ROWS = (14, 16, 18, 20)


@dataclass
class Question:
    """One question with four choices and the letter of the right one."""

    query: str
    a: str
    b: str
    c: str
    d: str
    answer: str

    @property
    def options(self) -> dict[str, str]:
        return dict(zip(ANSWER_LETTERS, (self.a, self.b, self.c, self.d)))

    def render(self) -> str:
        """The question and its choices, clearing what was there before."""
        parts = [goto(0, row) + ERASE for row in range(10, 14)]
        parts.append(goto(0, 10) + self.query)
        for row, text in zip(_ANSWER_ROWS, self.options.values()):
            parts.append(goto(20, row) + ERASE + goto(20, row) + text)
        return "".join(parts)


class QuestionList:
    """Questions asked so far, in order."""

    def __init__(self) -> None:
        self._items: list[Question] = []

    def __iter__(self) -> Iterator[Question]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Question:
        return self._items[index]

    def add(self, question: Question) -> None:
        self._items.append(question)

    def delete_wrong(self, answer: str) -> None:
        """Remove the first of the first two questions whose answer differs."""
        for index, question in enumerate(self._items[:2]):
            if question.answer != answer:
                del self._items[index]
                return

    def clear(self) -> None:
        self._items.clear()


def parse_questions(text: str) -> list[Question]:
    """Parse lines of ``query;A;B;C;D;letter``; anything after the letter is ignored."""
    questions = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        fields = line.split(";", 5)
        if len(fields) < 6 or not fields[5].strip():
            raise ValueError(f"line {number}: expected query, four answers and a letter")
        query, a, b, c, d, rest = fields
        questions.append(Question(query, a, b, c, d, rest.strip()[0]))
    return questions


def load_questions(path: str | os.PathLike[str]) -> list[Question]:
    """Read and parse a question file."""
    with open(path, encoding="utf-8") as handle:
        return parse_questions(handle.read())


def fifty_fifty(question: Question, rng: random.Random | None = None) -> tuple[str, str]:
    """The two letters taken away: the first two wrong choices, in random order."""
    rng = rng or random.Random()
    wrong = [letter for letter in ANSWER_LETTERS if letter != question.answer][:2]
    return tuple(rng.sample(wrong, 2))


def render_fifty_fifty(question: Question, removed) -> str:
    """The question with removed choices shown as bare letters."""
    removed = set(removed)
    parts = [goto(0, 10) + question.query]
    for row, (letter, text) in zip(_ANSWER_ROWS, question.options.items()):
        shown = text if text and letter not in removed else f"{letter}."
        parts.append(goto(20, row) + ERASE + goto(20, row) + shown)
    parts.append(help_screen(2))
    parts.append(draw_table())
    return "".join(parts)