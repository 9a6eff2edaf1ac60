"""An inline multiple-choice question and its answering state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ferrolearn.locale import Locale

__all__ = ["QuizOptionData", "OptionState", "Quiz"]

_BASE = "flex items-center p-3 rounded-lg border cursor-pointer transition-all"

_FEEDBACK = {
    (True, Locale.ES): "\u00a1Correcto! Bien hecho.",
    (True, Locale.EN): "Correct! Well done.",
    (False, Locale.ES): "Incorrecto. Intenta de nuevo revisando el material.",
    (False, Locale.EN): "Incorrect. Try again after reviewing the material.",
}


@dataclass(frozen=True, slots=True)
class QuizOptionData:
    """One answer with its text in both languages and whether it is right."""

    es: str
    en: str
    correct: bool

    def text(self, locale: Locale | str) -> str:
        """Return the answer's text in ``locale``."""
        return self.es if Locale(locale) is Locale.ES else self.en


class OptionState(Enum):
    """How an answer is shown, depending on selection and submission."""

    IDLE = "idle"
    SELECTED = "selected"
    CORRECT = "correct"
    WRONG = "wrong"
    DIMMED = "dimmed"

    @property
    def classes(self) -> str:
        """CSS classes of the answer's row."""
        return f"{_BASE} {_STATE_CLASSES[self]}"

    @property
    def mark(self) -> str:
        """The tick or cross shown after submission, or an empty string."""
        return _STATE_MARKS.get(self, "")


_STATE_CLASSES = {
    OptionState.IDLE: (
        "border-gray-200 dark:border-gray-600 hover:border-orange-300 "
        "hover:bg-gray-50 dark:hover:bg-gray-700"
    ),
    OptionState.SELECTED: "border-orange-500 bg-orange-50 dark:bg-orange-900/20",
    OptionState.CORRECT: "border-green-500 bg-green-50 dark:bg-green-900/30",
    OptionState.WRONG: "border-red-500 bg-red-50 dark:bg-red-900/30",
    OptionState.DIMMED: "border-gray-200 dark:border-gray-600 opacity-60",
}

_STATE_MARKS = {
    OptionState.CORRECT: "\u2713",
    OptionState.WRONG: "\u2717",
}


@dataclass
class Quiz:
    """A question whose answer is chosen once and then submitted."""

    question_es: str
    question_en: str
    options: list[QuizOptionData] = field(default_factory=list)
    selected: int | None = None
    submitted: bool = False

    def question(self, locale: Locale | str) -> str:
        """Return the question in ``locale``."""
        return self.question_es if Locale(locale) is Locale.ES else self.question_en

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.options):
            raise IndexError(f"no option {index}")

    def select(self, index: int) -> None:
        """Choose the answer at ``index``; answers are fixed once submitted."""
        self._check_index(index)
        if self.submitted:
            raise RuntimeError("quiz already submitted")
        self.selected = index

    def submit(self) -> None:
        """Lock in the chosen answer."""
        if self.selected is None:
            raise ValueError("no option selected")
        self.submitted = True

    def is_correct(self) -> bool:
        """Whether the chosen answer is a right one."""
        if self.selected is None or not 0 <= self.selected < len(self.options):
            return False
        return self.options[self.selected].correct

    def option_state(self, index: int) -> OptionState:
        """Return how the answer at ``index`` is to be shown."""
        self._check_index(index)
        is_selected = self.selected == index
        correct = self.options[index].correct
        if self.submitted:
            if correct:
                return OptionState.CORRECT
            if is_selected:
                return OptionState.WRONG
            return OptionState.DIMMED
        return OptionState.SELECTED if is_selected else OptionState.IDLE

    def feedback(self, locale: Locale | str) -> str | None:
        """Return the verdict message after submission, or None before it."""
        if not self.submitted:
            return None
        return _FEEDBACK[(self.is_correct(), Locale(locale))]