"""
Presentation normalizer for free-text course fields.

The extraction model usually returns assessment, exam dates and materials
as prose, but sometimes as JSON arrays. Every rendering surface goes
through the functions here so the dashboard and detail views always agree.

Each parse_* function returns a NormalizedField tagged either
"structured" (the stored text was a JSON array) or "free_text" (the text
was split heuristically).

Dependencies: pydantic, json, re
System role: Text/JSON normalization for course views
"""

import json
import re
from typing import Any, Generic, Iterable, Literal, TypeVar

from pydantic import BaseModel, Field

ASSESSMENT_KEYWORDS: tuple[str, ...] = (
    "Midterm",
    "Final",
    "Quiz",
    "Lab",
    "Homework",
    "Assignment",
    "Project",
    "Exam",
    "Test",
)
EXAM_KEYWORDS: tuple[str, ...] = ("Midterm", "Final", "Quiz", "Exam", "Test")

STRUCTURED = "structured"
FREE_TEXT = "free_text"

_PERCENT = re.compile(r"\d+(?:\.\d+)?%")
_LABEL_CLUTTER = re.compile(r"[:(\s]+$")
_NOTE_CLUTTER = re.compile(r"^[\s)]+")

ItemT = TypeVar("ItemT")


class AssessmentItem(BaseModel):
    """One graded component, e.g. "Midterm: 25%"."""

    label: str
    weight: str | None = None
    note: str | None = None
    text: str = Field(description="Plain rendering")
    markup: str = Field(description="Rendering with the weight in bold")


class ExamItem(BaseModel):
    """One exam entry; free-text entries only carry name and text."""

    name: str
    date: str | None = None
    time: str | None = None
    location: str | None = None
    text: str


class NormalizedField(BaseModel, Generic[ItemT]):
    """Tagged result: structured (JSON array) or free_text (split prose)."""

    kind: Literal["structured", "free_text"]
    items: list[ItemT] = Field(default_factory=list)


def _load_json_array(text: str) -> list | None:
    """Return the parsed list if text is a JSON array, else None."""
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return value if isinstance(value, list) else None


def _starts_with_keyword(text: str, keywords: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(lowered.startswith(keyword.lower()) for keyword in keywords)


def _is_soft_boundary(text: str, index: int, keywords: Iterable[str]) -> bool:
    """
    Decide whether the '.' or ',' at index ends a line item.

    A period always ends an item unless it sits between two digits
    ("2.5%"). A comma ends an item when the next word starts with an
    uppercase letter or an assessment keyword.
    """
    char = text[index]
    rest = text[index + 1:]

    if char == ".":
        before = text[index - 1] if index > 0 else ""
        return not (before.isdigit() and rest[:1].isdigit())

    if char == ",":
        following = rest.lstrip()
        if not following:
            return True
        return following[0].isupper() or _starts_with_keyword(following, keywords)

    return False


def split_line_items(text: str, keywords: Iterable[str] = ASSESSMENT_KEYWORDS) -> list[str]:
    """
    Split prose into candidate line items.

    Semicolons and newlines always split. Periods and commas split only
    outside parentheses and only where _is_soft_boundary allows, so
    "Midterm (covers ch. 1, 2): 20%" stays whole while
    "Midterm: 25%, Final Exam: 55%" splits in two.

    Args:
        text: Raw field text
        keywords: Words that start a new item after a comma

    Returns:
        list[str]: Trimmed, non-empty fragments in original order
    """
    keywords = tuple(keywords)
    fragments: list[str] = []
    current: list[str] = []
    depth = 0

    for index, char in enumerate(text):
        if char in ";\n\r":
            fragments.append("".join(current))
            current = []
            depth = 0
            continue
        if char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        elif char in ".," and depth == 0 and _is_soft_boundary(text, index, keywords):
            fragments.append("".join(current))
            current = []
            continue
        current.append(char)

    fragments.append("".join(current))
    return [fragment.strip() for fragment in fragments if fragment.strip()]


def _render_assessment(label: str, weight: str | None, note: str | None) -> tuple[str, str]:
    """Build (text, markup) for an assessment line."""
    if weight is None:
        plain = " ".join(part for part in (label, note) if part)
        return plain, plain

    head = f"{label}: " if label else ""
    tail = f" {note}" if note else ""
    return f"{head}{weight}{tail}", f"{head}**{weight}**{tail}"


def parse_assessment_fragment(fragment: str) -> AssessmentItem:
    """
    Turn one free-text fragment into an AssessmentItem.

    The last percentage in the fragment is the weight; numbers earlier in
    the fragment belong to the explanation ("Quizzes (best 8 of 10): 15%").

    Args:
        fragment: Trimmed line item

    Returns:
        AssessmentItem: Label/weight/note split, or plain text if no percentage
    """
    matches = list(_PERCENT.finditer(fragment))
    if not matches:
        return AssessmentItem(label=fragment, text=fragment, markup=fragment)

    last = matches[-1]
    label = _LABEL_CLUTTER.sub("", fragment[:last.start()].strip()).strip()
    note = _NOTE_CLUTTER.sub("", fragment[last.end():].strip()).strip() or None
    weight = last.group(0)
    text, markup = _render_assessment(label, weight, note)
    return AssessmentItem(label=label, weight=weight, note=note, text=text, markup=markup)


def _format_weight(value: Any) -> str | None:
    if value is None or value == "":
        return None
    raw = str(value).strip().rstrip("%").strip()
    return f"{raw}%" if raw else None


def _structured_assessment(entry: Any) -> AssessmentItem:
    if not isinstance(entry, dict):
        return parse_assessment_fragment(str(entry).strip())

    label = str(entry.get("name") or "").strip()
    weight = _format_weight(entry.get("weightPercent"))
    notes = str(entry.get("notes") or "").strip()
    note = f"({notes})" if notes else None
    text, markup = _render_assessment(label, weight, note)
    return AssessmentItem(label=label, weight=weight, note=note, text=text, markup=markup)


def parse_assessment(text: str | None) -> NormalizedField[AssessmentItem] | None:
    """
    Normalize the assessment field.

    Args:
        text: Stored assessment text (JSON array or prose)

    Returns:
        NormalizedField of AssessmentItem, or None when the field is empty
    """
    if not text or not text.strip():
        return None

    entries = _load_json_array(text)
    if entries is not None:
        return NormalizedField[AssessmentItem](
            kind=STRUCTURED,
            items=[_structured_assessment(entry) for entry in entries],
        )

    return NormalizedField[AssessmentItem](
        kind=FREE_TEXT,
        items=[parse_assessment_fragment(f) for f in split_line_items(text, ASSESSMENT_KEYWORDS)],
    )


def _structured_exam(entry: Any) -> ExamItem:
    if not isinstance(entry, dict):
        name = str(entry).strip()
        return ExamItem(name=name, text=name)

    name = str(entry.get("name") or "").strip()
    date, time, location = (
        str(entry.get(key)).strip() if entry.get(key) else None
        for key in ("date", "time", "location")
    )
    details = ", ".join(part for part in (date, time, location) if part)
    text = f"{name}: {details}" if name and details else (name or details)
    return ExamItem(name=name, date=date, time=time, location=location, text=text)


def parse_exam_dates(text: str | None) -> NormalizedField[ExamItem] | None:
    """
    Normalize the exam dates field.

    Args:
        text: Stored exam dates text (JSON array or prose)

    Returns:
        NormalizedField of ExamItem, or None when the field is empty
    """
    if not text or not text.strip():
        return None

    entries = _load_json_array(text)
    if entries is not None:
        return NormalizedField[ExamItem](
            kind=STRUCTURED,
            items=[_structured_exam(entry) for entry in entries],
        )

    return NormalizedField[ExamItem](
        kind=FREE_TEXT,
        items=[ExamItem(name=f, text=f) for f in split_line_items(text, EXAM_KEYWORDS)],
    )


def parse_materials(text: str | None) -> NormalizedField[str] | None:
    """
    Normalize the materials field.

    A JSON array becomes a bullet list; anything else stays one paragraph.

    Args:
        text: Stored materials text

    Returns:
        NormalizedField of str, or None when the field is empty
    """
    if not text or not text.strip():
        return None

    entries = _load_json_array(text)
    if entries is not None:
        return NormalizedField[str](
            kind=STRUCTURED,
            items=[str(entry).strip() for entry in entries if str(entry).strip()],
        )

    return NormalizedField[str](kind=FREE_TEXT, items=[text.strip()])


def section_type(section_code: str | None) -> str:
    """
    Category of a section from its leading uppercase letters.

    "LEC0101" -> "LEC", "TUT5101" -> "TUT", "0101" -> "OTHER".
    """
    match = re.match(r"^([A-Z]+)", section_code or "")
    return match.group(1) if match else "OTHER"
