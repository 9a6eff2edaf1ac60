"""Reading compiler output: error codes, coloured segments and output checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ferrolearn.locale import Locale
from ferrolearn.translations import get_translations

__all__ = [
    "SegmentKind",
    "SEGMENT_CLASSES",
    "OutputSegment",
    "extract_error_codes",
    "parse_output_segments",
    "EXPLAINED_CODES",
    "ErrorExplanation",
    "explain_error",
    "OutputVerdict",
    "evaluate_output",
]

_ERROR_OPEN = b"error["


class SegmentKind(Enum):
    """The role a line plays in compiler output."""

    ERROR_HEADER = "error_header"
    LOCATION = "location"
    HELP = "help"
    WARNING = "warning"
    NOTE = "note"
    NORMAL = "normal"


SEGMENT_CLASSES = {
    SegmentKind.ERROR_HEADER: "font-mono text-sm text-red-400 font-bold",
    SegmentKind.LOCATION: "font-mono text-sm text-blue-400",
    SegmentKind.HELP: "font-mono text-sm text-green-400",
    SegmentKind.WARNING: "font-mono text-sm text-yellow-400",
    SegmentKind.NOTE: "font-mono text-sm text-cyan-400",
    SegmentKind.NORMAL: "font-mono text-sm text-gray-400",
}

# Checked in this order; the first matching prefix decides the kind.
_PREFIXES: tuple[tuple[SegmentKind, tuple[str, ...]], ...] = (
    (SegmentKind.ERROR_HEADER, ("error[", "error:")),
    (SegmentKind.LOCATION, ("-->", ":::")),
    (SegmentKind.HELP, ("help:", "= help:")),
    (SegmentKind.WARNING, ("warning[", "warning:")),
    (SegmentKind.NOTE, ("note:", "= note:")),
)


@dataclass(frozen=True, slots=True)
class OutputSegment:
    """One line of output together with its role."""

    kind: SegmentKind
    text: str


def _is_error_code(code: bytes) -> bool:
    return (
        code.startswith(b"E")
        and len(code) >= 4
        and all(0x30 <= c <= 0x39 for c in code[1:])
    )


def extract_error_codes(text: str) -> list[str]:
    """Return the distinct ``error[E####]`` codes in ``text``, in order of appearance."""
    data = text.encode("utf-8")
    codes: list[str] = []
    pos = 0
    while True:
        start = data.find(_ERROR_OPEN, pos)
        if start == -1 or start + 7 >= len(data):
            break
        end = data.find(b"]", start + len(_ERROR_OPEN))
        if end == -1:
            break
        code = data[start + len(_ERROR_OPEN):end]
        if _is_error_code(code):
            code_str = code.decode("ascii")
            if code_str not in codes:
                codes.append(code_str)
        pos = end + 1
    return codes


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _kind_of(line: str) -> SegmentKind:
    trimmed = line.lstrip()
    for kind, prefixes in _PREFIXES:
        if trimmed.startswith(prefixes):
            return kind
    return SegmentKind.NORMAL


def parse_output_segments(text: str) -> list[OutputSegment]:
    """Split ``text`` into lines and classify each one."""
    return [OutputSegment(_kind_of(line), line) for line in _lines(text)]


EXPLAINED_CODES = ("E0382", "E0502", "E0308", "E0425", "E0384", "E0106")


@dataclass(frozen=True, slots=True)
class ErrorExplanation:
    """A beginner-friendly account of one compiler error code."""

    code: str
    what: str
    why: str
    fix: str


def explain_error(error_code: str, locale: Locale | str) -> ErrorExplanation | None:
    """Explain ``error_code`` in ``locale``, or return None for a code not covered."""
    if error_code not in EXPLAINED_CODES:
        return None
    tr = get_translations(locale)
    prefix = f"error_{error_code.lower()}"
    return ErrorExplanation(
        code=error_code,
        what=getattr(tr, f"{prefix}_what"),
        why=getattr(tr, f"{prefix}_why"),
        fix=getattr(tr, f"{prefix}_fix"),
    )


@dataclass(frozen=True, slots=True)
class OutputVerdict:
    """Output of a successful run, checked against the expected output if any."""

    output: str
    expected: str | None
    passed: bool | None

    @property
    def checked(self) -> bool:
        """Whether there was expected output to compare with."""
        return self.expected is not None


def evaluate_output(output: str, expected: str | None = None) -> OutputVerdict:
    """Compare ``output`` with ``expected``, ignoring surrounding whitespace.

    An empty or missing ``expected`` means there is nothing to check.
    """
    if not expected:
        return OutputVerdict(output, None, None)
    return OutputVerdict(output, expected, output.strip() == expected.strip())