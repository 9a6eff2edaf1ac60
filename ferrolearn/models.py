"""Course content and progress records, with conversion to and from plain dicts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeAlias

__all__ = [
    "I18nText",
    "ExerciseType",
    "ExerciseMeta",
    "HintsI18n",
    "PredictOption",
    "Exercise",
    "LessonMetadata",
    "QuizOption",
    "TextBlock",
    "CodeBlock",
    "CalloutBlock",
    "QuizBlock",
    "ContentBlock",
    "parse_content_block",
    "content_block_to_dict",
    "Lesson",
    "LessonMeta",
    "Module",
    "ProgressStatus",
    "UserProgress",
    "ProjectStep",
    "Project",
]

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a mapping, got {type(data).__name__}")
    return data


def _get(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _str(data: Mapping[str, Any], key: str) -> str:
    value = _get(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field `{key}`: expected a string")
    return value


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field `{key}`: expected a string or nothing")
    return value


def _int(data: Mapping[str, Any], key: str, low: int, high: int) -> int:
    value = _get(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{key}`: expected an integer")
    if not low <= value <= high:
        raise ValueError(f"field `{key}`: {value} is out of range")
    return value


def _u32(data: Mapping[str, Any], key: str) -> int:
    return _int(data, key, 0, _U32_MAX)


def _i32(data: Mapping[str, Any], key: str) -> int:
    return _int(data, key, _I32_MIN, _I32_MAX)


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = _get(data, key)
    if not isinstance(value, bool):
        raise ValueError(f"field `{key}`: expected a boolean")
    return value


def _list(value: Any, key: str) -> list[Any]:
    if not isinstance(value, list | tuple):
        raise ValueError(f"field `{key}`: expected a list")
    return list(value)


def _str_list(value: Any, key: str) -> list[str]:
    items = _list(value, key)
    if not all(isinstance(item, str) for item in items):
        raise ValueError(f"field `{key}`: expected a list of strings")
    return items


@dataclass(slots=True)
class I18nText:
    """A piece of text in Spanish and English."""

    es: str
    en: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> I18nText:
        data = _mapping(data, "text")
        return cls(es=_str(data, "es"), en=_str(data, "en"))

    def to_dict(self) -> dict[str, Any]:
        return {"es": self.es, "en": self.en}


class ExerciseType(Enum):
    """The kind of task an exercise sets."""

    WRITE_CODE = "write_code"
    FIX_BUG = "fix_bug"
    PREDICT_OUTPUT = "predict_output"

    def label_es(self) -> str:
        return _EXERCISE_LABELS_ES[self]

    def label_en(self) -> str:
        return _EXERCISE_LABELS_EN[self]

    def badge_classes(self) -> str:
        return _EXERCISE_BADGES[self]


_EXERCISE_LABELS_ES = {
    ExerciseType.WRITE_CODE: "Escribir Codigo",
    ExerciseType.FIX_BUG: "Corregir Error",
    ExerciseType.PREDICT_OUTPUT: "Predecir Salida",
}

_EXERCISE_LABELS_EN = {
    ExerciseType.WRITE_CODE: "Write Code",
    ExerciseType.FIX_BUG: "Fix the Bug",
    ExerciseType.PREDICT_OUTPUT: "Predict Output",
}

_EXERCISE_BADGES = {
    ExerciseType.WRITE_CODE: "bg-blue-100 dark:bg-blue-900/30 text-blue-700 dark:text-blue-300",
    ExerciseType.FIX_BUG: "bg-red-100 dark:bg-red-900/30 text-red-700 dark:text-red-300",
    ExerciseType.PREDICT_OUTPUT: (
        "bg-purple-100 dark:bg-purple-900/30 text-purple-700 dark:text-purple-300"
    ),
}


def _enum(enum_cls: type[Enum], value: Any, key: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"field `{key}`: unknown variant {value!r}") from None


@dataclass(slots=True)
class ExerciseMeta:
    """Identification and ordering of an exercise."""

    id: str
    module: str
    difficulty: str
    order: int
    exercise_type: ExerciseType = ExerciseType.WRITE_CODE
    prerequisites: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ExerciseMeta:
        data = _mapping(data, "meta")
        exercise_type = ExerciseType.WRITE_CODE
        if "exercise_type" in data:
            exercise_type = _enum(ExerciseType, data["exercise_type"], "exercise_type")
        return cls(
            id=_str(data, "id"),
            module=_str(data, "module"),
            difficulty=_str(data, "difficulty"),
            order=_u32(data, "order"),
            exercise_type=exercise_type,
            prerequisites=_str_list(data.get("prerequisites", []), "prerequisites"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "module": self.module,
            "difficulty": self.difficulty,
            "order": self.order,
            "exercise_type": self.exercise_type.value,
            "prerequisites": list(self.prerequisites),
        }


@dataclass(slots=True)
class HintsI18n:
    """Hints for an exercise in both languages."""

    es: list[str]
    en: list[str]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HintsI18n:
        data = _mapping(data, "hints")
        return cls(
            es=_str_list(_get(data, "es"), "es"),
            en=_str_list(_get(data, "en"), "en"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"es": list(self.es), "en": list(self.en)}


@dataclass(slots=True)
class PredictOption:
    """One answer offered in a predict-the-output exercise."""

    es: str
    en: str
    correct: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PredictOption:
        data = _mapping(data, "option")
        return cls(es=_str(data, "es"), en=_str(data, "en"), correct=_bool(data, "correct"))

    def to_dict(self) -> dict[str, Any]:
        return {"es": self.es, "en": self.en, "correct": self.correct}


@dataclass(slots=True)
class Exercise:
    """A practice exercise."""

    meta: ExerciseMeta
    title: I18nText
    description: I18nText
    starter_code: str
    expected_output: str
    hints: HintsI18n
    solution: str
    broken_code: str | None = None
    compiler_error: I18nText | None = None
    options: list[PredictOption] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Exercise:
        data = _mapping(data, "exercise")
        compiler_error = data.get("compiler_error")
        options = data.get("options")
        return cls(
            meta=ExerciseMeta.from_dict(_get(data, "meta")),
            title=I18nText.from_dict(_get(data, "title")),
            description=I18nText.from_dict(_get(data, "description")),
            starter_code=_str(data, "starter_code"),
            expected_output=_str(data, "expected_output"),
            hints=HintsI18n.from_dict(_get(data, "hints")),
            solution=_str(data, "solution"),
            broken_code=_opt_str(data, "broken_code"),
            compiler_error=(
                None if compiler_error is None else I18nText.from_dict(compiler_error)
            ),
            options=(
                None
                if options is None
                else [PredictOption.from_dict(o) for o in _list(options, "options")]
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "meta": self.meta.to_dict(),
            "title": self.title.to_dict(),
            "description": self.description.to_dict(),
            "starter_code": self.starter_code,
            "expected_output": self.expected_output,
            "hints": self.hints.to_dict(),
            "solution": self.solution,
            "broken_code": self.broken_code,
            "compiler_error": (
                None if self.compiler_error is None else self.compiler_error.to_dict()
            ),
            "options": (
                None if self.options is None else [o.to_dict() for o in self.options]
            ),
        }


@dataclass(slots=True)
class LessonMetadata:
    """Identification and ordering of a lesson."""

    id: str
    order: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LessonMetadata:
        data = _mapping(data, "meta")
        return cls(id=_str(data, "id"), order=_u32(data, "order"))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "order": self.order}


@dataclass(slots=True)
class QuizOption:
    """One answer of an inline quiz."""

    es: str
    en: str
    correct: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> QuizOption:
        data = _mapping(data, "option")
        return cls(es=_str(data, "es"), en=_str(data, "en"), correct=_bool(data, "correct"))

    def to_dict(self) -> dict[str, Any]:
        return {"es": self.es, "en": self.en, "correct": self.correct}


@dataclass(slots=True)
class TextBlock:
    """Explanatory text in both languages."""

    es: str
    en: str


@dataclass(slots=True)
class CodeBlock:
    """A code sample, optionally runnable."""

    language: str
    runnable: bool
    code: str


@dataclass(slots=True)
class CalloutBlock:
    """A highlighted note of a given variant."""

    variant: str
    es: str
    en: str


@dataclass(slots=True)
class QuizBlock:
    """A multiple-choice question."""

    es: str
    en: str
    options: list[QuizOption]


ContentBlock: TypeAlias = TextBlock | CodeBlock | CalloutBlock | QuizBlock


def parse_content_block(data: Mapping[str, Any]) -> ContentBlock:
    """Build a content block from a dict tagged by its ``type`` key."""
    data = _mapping(data, "block")
    kind = _get(data, "type")
    match kind:
        case "text":
            return TextBlock(es=_str(data, "es"), en=_str(data, "en"))
        case "code":
            return CodeBlock(
                language=_str(data, "language"),
                runnable=_bool(data, "runnable"),
                code=_str(data, "code"),
            )
        case "callout":
            return CalloutBlock(
                variant=_str(data, "variant"), es=_str(data, "es"), en=_str(data, "en")
            )
        case "quiz":
            return QuizBlock(
                es=_str(data, "es"),
                en=_str(data, "en"),
                options=[QuizOption.from_dict(o) for o in _list(_get(data, "options"), "options")],
            )
        case _:
            raise ValueError(f"unknown content block type {kind!r}")


def content_block_to_dict(block: ContentBlock) -> dict[str, Any]:
    """Turn a content block into a dict tagged by its ``type`` key."""
    match block:
        case TextBlock(es=es, en=en):
            return {"type": "text", "es": es, "en": en}
        case CodeBlock(language=language, runnable=runnable, code=code):
            return {"type": "code", "language": language, "runnable": runnable, "code": code}
        case CalloutBlock(variant=variant, es=es, en=en):
            return {"type": "callout", "variant": variant, "es": es, "en": en}
        case QuizBlock(es=es, en=en, options=options):
            return {
                "type": "quiz",
                "es": es,
                "en": en,
                "options": [o.to_dict() for o in options],
            }
    raise TypeError(f"not a content block: {type(block).__name__}")


def _blocks(value: Any, key: str) -> list[ContentBlock]:
    return [parse_content_block(item) for item in _list(value, key)]


@dataclass(slots=True)
class Lesson:
    """A theory lesson made of content blocks."""

    meta: LessonMetadata
    title: I18nText
    blocks: list[ContentBlock]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Lesson:
        data = _mapping(data, "lesson")
        return cls(
            meta=LessonMetadata.from_dict(_get(data, "meta")),
            title=I18nText.from_dict(_get(data, "title")),
            blocks=_blocks(_get(data, "blocks"), "blocks"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "meta": self.meta.to_dict(),
            "title": self.title.to_dict(),
            "blocks": [content_block_to_dict(b) for b in self.blocks],
        }


@dataclass(slots=True)
class LessonMeta:
    """A lesson entry in a module's table of contents."""

    id: str
    order: int
    title_es: str
    title_en: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LessonMeta:
        data = _mapping(data, "lesson entry")
        return cls(
            id=_str(data, "id"),
            order=_u32(data, "order"),
            title_es=_str(data, "title_es"),
            title_en=_str(data, "title_en"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "order": self.order,
            "title_es": self.title_es,
            "title_en": self.title_en,
        }


@dataclass(slots=True)
class Module:
    """A theory module grouping lessons."""

    id: str
    order: int
    title_es: str
    title_en: str
    description_es: str
    description_en: str
    lessons: list[LessonMeta]
    icon: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Module:
        data = _mapping(data, "module")
        return cls(
            id=_str(data, "id"),
            order=_u32(data, "order"),
            title_es=_str(data, "title_es"),
            title_en=_str(data, "title_en"),
            description_es=_str(data, "description_es"),
            description_en=_str(data, "description_en"),
            lessons=[LessonMeta.from_dict(x) for x in _list(_get(data, "lessons"), "lessons")],
            icon=_str(data, "icon"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "order": self.order,
            "title_es": self.title_es,
            "title_en": self.title_en,
            "description_es": self.description_es,
            "description_en": self.description_en,
            "lessons": [x.to_dict() for x in self.lessons],
            "icon": self.icon,
        }


class ProgressStatus(Enum):
    """How far a learner has come with an item."""

    LOCKED = "locked"
    AVAILABLE = "available"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(slots=True)
class UserProgress:
    """A learner's progress on one lesson, exercise or project."""

    id: str
    category: str
    status: ProgressStatus
    score: int
    attempts: int
    completed_at: str | None
    updated_at: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UserProgress:
        data = _mapping(data, "progress")
        return cls(
            id=_str(data, "id"),
            category=_str(data, "category"),
            status=_enum(ProgressStatus, _get(data, "status"), "status"),
            score=_i32(data, "score"),
            attempts=_i32(data, "attempts"),
            completed_at=_opt_str(data, "completed_at"),
            updated_at=_str(data, "updated_at"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "status": self.status.value,
            "score": self.score,
            "attempts": self.attempts,
            "completed_at": self.completed_at,
            "updated_at": self.updated_at,
        }


@dataclass(slots=True)
class ProjectStep:
    """One step of a guided project."""

    order: int
    title: I18nText
    content: list[ContentBlock]
    starter_code: str | None = None
    expected_output: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProjectStep:
        data = _mapping(data, "step")
        return cls(
            order=_u32(data, "order"),
            title=I18nText.from_dict(_get(data, "title")),
            content=_blocks(_get(data, "content"), "content"),
            starter_code=_opt_str(data, "starter_code"),
            expected_output=_opt_str(data, "expected_output"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "order": self.order,
            "title": self.title.to_dict(),
            "content": [content_block_to_dict(b) for b in self.content],
            "starter_code": self.starter_code,
            "expected_output": self.expected_output,
        }


@dataclass(slots=True)
class Project:
    """A guided project made of ordered steps."""

    id: str
    title: I18nText
    description: I18nText
    difficulty: str
    steps: list[ProjectStep]
    prerequisites: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Project:
        data = _mapping(data, "project")
        return cls(
            id=_str(data, "id"),
            title=I18nText.from_dict(_get(data, "title")),
            description=I18nText.from_dict(_get(data, "description")),
            difficulty=_str(data, "difficulty"),
            steps=[ProjectStep.from_dict(s) for s in _list(_get(data, "steps"), "steps")],
            prerequisites=_str_list(data.get("prerequisites", []), "prerequisites"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title.to_dict(),
            "description": self.description.to_dict(),
            "difficulty": self.difficulty,
            "steps": [s.to_dict() for s in self.steps],
            "prerequisites": list(self.prerequisites),
        }