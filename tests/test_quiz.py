import pytest

from ferrolearn.locale import Locale
from ferrolearn.quiz import OptionState, Quiz, QuizOptionData


def make_quiz():
    return Quiz(
        question_es="¿Cuál es correcto?",
        question_en="Which is correct?",
        options=[
            QuizOptionData("uno", "one", False),
            QuizOptionData("dos", "two", True),
            QuizOptionData("tres", "three", False),
        ],
    )


def test_question_by_locale():
    quiz = make_quiz()
    assert quiz.question(Locale.ES) == "¿Cuál es correcto?"
    assert quiz.question(Locale.EN) == "Which is correct?"
    assert quiz.question("en") == "Which is correct?"


def test_option_text_by_locale():
    option = make_quiz().options[1]
    assert option.text(Locale.ES) == "dos"
    assert option.text(Locale.EN) == "two"


def test_initial_state():
    quiz = make_quiz()
    assert quiz.selected is None
    assert quiz.is_correct() is False
    assert quiz.feedback(Locale.EN) is None
    assert [quiz.option_state(i) for i in range(3)] == [OptionState.IDLE] * 3


def test_select_marks_option():
    quiz = make_quiz()
    quiz.select(2)
    assert quiz.selected == 2
    assert quiz.option_state(2) is OptionState.SELECTED
    assert quiz.option_state(0) is OptionState.IDLE


def test_submit_without_selection_fails():
    quiz = make_quiz()
    with pytest.raises(ValueError):
        quiz.submit()
    assert quiz.submitted is False


def test_correct_answer():
    quiz = make_quiz()
    quiz.select(1)
    quiz.submit()
    assert quiz.is_correct() is True
    assert quiz.option_state(1) is OptionState.CORRECT
    assert quiz.option_state(0) is OptionState.DIMMED
    assert quiz.feedback(Locale.EN) == "Correct! Well done."
    assert quiz.feedback(Locale.ES) == "\u00a1Correcto! Bien hecho."


def test_wrong_answer():
    quiz = make_quiz()
    quiz.select(0)
    quiz.submit()
    assert quiz.is_correct() is False
    assert quiz.option_state(0) is OptionState.WRONG
    assert quiz.option_state(1) is OptionState.CORRECT
    assert quiz.option_state(2) is OptionState.DIMMED
    assert quiz.feedback(Locale.EN) == "Incorrect. Try again after reviewing the material."
    assert quiz.feedback(Locale.ES) == "Incorrecto. Intenta de nuevo revisando el material."


def test_select_after_submit_is_refused():
    quiz = make_quiz()
    quiz.select(0)
    quiz.submit()
    with pytest.raises(RuntimeError):
        quiz.select(1)
    assert quiz.selected == 0


def test_select_out_of_range():
    quiz = make_quiz()
    with pytest.raises(IndexError):
        quiz.select(3)
    with pytest.raises(IndexError):
        quiz.option_state(-1)


def test_state_marks_and_classes():
    assert OptionState.CORRECT.mark == "\u2713"
    assert OptionState.WRONG.mark == "\u2717"
    assert OptionState.IDLE.mark == ""
    assert OptionState.CORRECT.classes.endswith(
        "border-green-500 bg-green-50 dark:bg-green-900/30"
    )
    assert OptionState.DIMMED.classes.endswith("opacity-60")