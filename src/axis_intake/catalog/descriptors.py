"""Question descriptor types and the small builders the catalog is written with.

Every question in the application is one ``QuestionDescriptor``; the kind tag
selects how the section renderer draws its answer.  Follow-ups are nested
descriptor lists guarded by a ``Trigger`` that is evaluated against the set of
values selected on the parent question.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Protocol, runtime_checkable

from axis_intake.exceptions import CatalogError
from axis_intake.models import is_absent

NOT_PROVIDED = "Not provided"
NO_SELECTION = "No selection"
CHECKED = "☑"
UNCHECKED = "☐"

Unit = Literal["percent", "currency"]
Align = Literal["left", "center", "right"]


class QuestionKind(str, Enum):
    """Rendering kind of a question."""

    TEXT = "text"
    NUMBER = "number"
    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    COMPOSITE = "composite"
    TABLE = "table"


def format_unit(value: Any, unit: Unit | None) -> str:
    """Render a numeric answer with its unit; absent values become ``0``."""
    text = "0" if is_absent(value) else str(value).strip()
    if unit == "percent":
        return f"{text}%"
    if unit == "currency":
        return f"${text}"
    return text


def truncate(text: str, max_chars: int | None) -> str:
    if max_chars is None or len(text) <= max_chars:
        return text
    return text[: max_chars - 3] + "..."


# ── Choice options and triggers ──────────────────────────────────────


@dataclass(frozen=True)
class Option:
    """One selectable option.

    ``key`` binds the option to its own answer field holding ``"yes"`` when
    ticked; options without a key are looked up in the parent's value.
    """

    value: str
    label: str
    key: str | None = None


@dataclass(frozen=True)
class Trigger:
    """Predicate over a parent question's selected-value set.

    ``values=None`` means "any option selected".
    """

    values: frozenset[str] | None = None

    def matches(self, selected: frozenset[str]) -> bool:
        if self.values is None:
            return bool(selected)
        return not self.values.isdisjoint(selected)

    @property
    def is_any(self) -> bool:
        return self.values is None


@dataclass(frozen=True)
class FollowUp:
    """Questions rendered only when ``trigger`` matches the parent's selection."""

    trigger: Trigger
    questions: tuple[QuestionDescriptor, ...]


# ── Composite sub-fields ─────────────────────────────────────────────


@dataclass(frozen=True)
class SubField:
    """A labelled line inside a composite question."""

    key: str
    label: str
    suffix: str = ""
    unit: Unit | None = None

    def line(self, answers: Mapping[str, Any]) -> str:
        value = answers.get(self.key)
        if self.unit is not None:
            return f"{self.label}: {format_unit(value, self.unit)}"
        if is_absent(value):
            return f"{self.label}: {NOT_PROVIDED}"
        return f"{self.label}: {_as_text(value)}{self.suffix}"


# ── Table cells ──────────────────────────────────────────────────────


@runtime_checkable
class Cell(Protocol):
    """Anything that renders one table cell from a section's answers."""

    def text(self, answers: Mapping[str, Any]) -> str: ...


@dataclass(frozen=True)
class Static:
    value: str

    def text(self, answers: Mapping[str, Any]) -> str:
        return self.value


@dataclass(frozen=True)
class FieldValue:
    """The answer stored under ``key`` with default, affixes and a length budget."""

    key: str
    default: str = NOT_PROVIDED
    prefix: str = ""
    suffix: str = ""
    max_chars: int | None = None

    def __post_init__(self) -> None:
        if self.max_chars is not None and self.max_chars <= 3:
            raise CatalogError(f"Field {self.key!r} needs max_chars above 3 to leave room for the ellipsis")

    def text(self, answers: Mapping[str, Any]) -> str:
        value = answers.get(self.key)
        raw = self.default if is_absent(value) else _as_text(value)
        return f"{self.prefix}{truncate(raw, self.max_chars)}{self.suffix}"


@dataclass(frozen=True)
class ChoiceLabel:
    """Maps a stored choice to a short label, ``default`` when unmatched."""

    key: str
    labels: tuple[tuple[str, str], ...] = (("yes", "Yes"), ("no", "No"))
    default: str = "-"

    def text(self, answers: Mapping[str, Any]) -> str:
        value = answers.get(self.key)
        for stored, label in self.labels:
            if value == stored:
                return label
        return self.default


@dataclass(frozen=True)
class GatedValue:
    """Shows ``key`` only when ``gate_key`` holds ``gate_value``."""

    key: str
    gate_key: str
    gate_value: str = "yes"
    empty: str = "No details"
    otherwise: str = "N/A"

    def text(self, answers: Mapping[str, Any]) -> str:
        if answers.get(self.gate_key) != self.gate_value:
            return self.otherwise
        value = answers.get(self.key)
        return self.empty if is_absent(value) else _as_text(value)


@dataclass(frozen=True)
class Column:
    header: str
    width: float
    align: Align = "left"


@dataclass(frozen=True)
class TableSpec:
    """Header columns plus one row of cells per repeat slot or category.

    Column widths are fractions of the content width.
    """

    columns: tuple[Column, ...]
    rows: tuple[tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        if not self.columns:
            raise CatalogError("Table needs at least one column")
        for row in self.rows:
            if len(row) != len(self.columns):
                raise CatalogError(
                    f"Table row has {len(row)} cells, expected {len(self.columns)}"
                )
        total = sum(c.width for c in self.columns)
        if total > 1.0 + 1e-6:
            raise CatalogError(f"Table column widths sum to {total:.2f} (> 1.0)")

    def body(self, answers: Mapping[str, Any]) -> list[list[str]]:
        return [[cell.text(answers) for cell in row] for row in self.rows]


# ── Question descriptor ──────────────────────────────────────────────


@dataclass(frozen=True)
class QuestionDescriptor:
    """A single question: prompt text, bound field keys, kind and follow-up.

    An empty ``text`` suppresses the prompt line, which is how inline
    follow-ups such as ``% revenue: 12`` are declared.
    """

    text: str
    kind: QuestionKind
    keys: tuple[str, ...] = ()
    options: tuple[Option, ...] = ()
    fields: tuple[SubField, ...] = ()
    table: TableSpec | None = None
    unit: Unit | None = None
    answer_label: str = "Answer"
    follow_up: FollowUp | None = None

    def __post_init__(self) -> None:
        kind = self.kind
        if kind in (QuestionKind.TEXT, QuestionKind.NUMBER, QuestionKind.SINGLE_CHOICE) and len(self.keys) != 1:
            raise CatalogError(f"{kind.value} question {self.text!r} must bind exactly one field")
        if kind in (QuestionKind.SINGLE_CHOICE, QuestionKind.MULTI_CHOICE) and not self.options:
            raise CatalogError(f"Choice question {self.text!r} declares no options")
        if kind == QuestionKind.MULTI_CHOICE:
            keyed = [o for o in self.options if o.key]
            if keyed and len(keyed) != len(self.options):
                raise CatalogError(f"Question {self.text!r} mixes keyed and unkeyed options")
            if not keyed and len(self.keys) != 1:
                raise CatalogError(f"Question {self.text!r} must bind the field holding its selection")
        if kind == QuestionKind.COMPOSITE and not self.fields:
            raise CatalogError(f"Composite question {self.text!r} declares no fields")
        if kind == QuestionKind.TABLE and self.table is None:
            raise CatalogError(f"Table question {self.text!r} declares no table")
        if self.follow_up is not None:
            self._check_trigger(self.follow_up.trigger)

    def _check_trigger(self, trigger: Trigger) -> None:
        if self.kind not in (QuestionKind.SINGLE_CHOICE, QuestionKind.MULTI_CHOICE):
            raise CatalogError(f"Follow-up on non-choice question {self.text!r}")
        if trigger.is_any:
            if self.kind != QuestionKind.MULTI_CHOICE:
                raise CatalogError(f"'any selected' trigger on single-choice question {self.text!r}")
            return
        declared = {o.value for o in self.options}
        unknown = set(trigger.values or ()) - declared
        if unknown:
            raise CatalogError(
                f"Follow-up trigger values {sorted(unknown)} not among options of {self.text!r}"
            )

    @property
    def key(self) -> str:
        return self.keys[0] if self.keys else ""

    def selected(self, answers: Mapping[str, Any]) -> frozenset[str]:
        """Option values currently selected for this question."""
        if self.kind == QuestionKind.SINGLE_CHOICE:
            value = answers.get(self.key)
            return frozenset(o.value for o in self.options if o.value == value)
        if self.kind == QuestionKind.MULTI_CHOICE:
            if self.options[0].key:
                return frozenset(o.value for o in self.options if _is_ticked(answers.get(o.key or "")))
            raw = answers.get(self.key)
            if is_absent(raw):
                return frozenset()
            if isinstance(raw, str):
                chosen = {raw}
            elif isinstance(raw, (list, tuple, set, frozenset)):
                chosen = {str(v) for v in raw}
            else:
                chosen = set()
            return frozenset(o.value for o in self.options if o.value in chosen)
        return frozenset()

    def answer_line(self, answers: Mapping[str, Any]) -> str:
        """``Answer: value`` line for free-text and numeric questions."""
        value = answers.get(self.key)
        if self.unit is not None:
            shown = format_unit(value, self.unit)
        elif is_absent(value):
            shown = NOT_PROVIDED
        else:
            shown = _as_text(value)
        return f"{self.answer_label}: {shown}"

    def selected_option(self, answers: Mapping[str, Any]) -> Option | None:
        chosen = self.selected(answers)
        for option in self.options:
            if option.value in chosen:
                return option
        return None

    def follow_up_active(self, answers: Mapping[str, Any]) -> bool:
        return self.follow_up is not None and self.follow_up.trigger.matches(self.selected(answers))


@dataclass(frozen=True)
class SectionSpec:
    """Ordered questions of one numbered section.

    ``answer_key`` names the AnswerRecord slice; ``sector`` is set on
    conditional sections and names the sector that includes them.
    """

    title: str
    number: int
    answer_key: str
    questions: tuple[QuestionDescriptor, ...]
    question_reserve_mm: float | None = None
    sector: str | None = None


def _as_text(value: Any) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(str(v) for v in value)
    return str(value).strip()


def _is_ticked(value: Any) -> bool:
    return value is True or (isinstance(value, str) and value.strip().lower() in ("yes", "on", "true"))


# ── Catalog builders ─────────────────────────────────────────────────
# Thin constructors that keep the section catalogs readable as data.

YES_NO: tuple[Option, ...] = (Option("yes", "Yes"), Option("no", "No"))


def text(question: str, key: str, answer_label: str = "Answer") -> QuestionDescriptor:
    return QuestionDescriptor(question, QuestionKind.TEXT, keys=(key,), answer_label=answer_label)


def number(question: str, key: str, unit: Unit | None = None) -> QuestionDescriptor:
    return QuestionDescriptor(question, QuestionKind.NUMBER, keys=(key,), unit=unit)


def labelled(label: str, key: str, suffix: str = "") -> QuestionDescriptor:
    """Promptless single-line follow-up rendered as ``label: value``."""
    return composite("", [(key, label)], suffix=suffix)


def choice(
    question: str,
    key: str,
    options: Iterable[Option | tuple[str, str]],
    follow_up: FollowUp | None = None,
) -> QuestionDescriptor:
    opts = tuple(o if isinstance(o, Option) else Option(*o) for o in options)
    return QuestionDescriptor(question, QuestionKind.SINGLE_CHOICE, keys=(key,), options=opts, follow_up=follow_up)


def yes_no(question: str, key: str, follow_up: FollowUp | None = None) -> QuestionDescriptor:
    return choice(question, key, YES_NO, follow_up)


def scale(question: str, key: str, labels: Iterable[str]) -> QuestionDescriptor:
    """Maturity scale stored as ``"1"``..``"4"``."""
    return choice(question, key, [Option(str(i), label) for i, label in enumerate(labels, start=1)])


def statements(question: str, key: str, labels: Iterable[str]) -> QuestionDescriptor:
    """Maturity scale whose stored value is the statement text itself."""
    return choice(question, key, [Option(label, label) for label in labels])


def checkboxes(
    question: str,
    key: str | None,
    options: Iterable[Option | tuple[str, str]],
    follow_up: FollowUp | None = None,
) -> QuestionDescriptor:
    opts = tuple(o if isinstance(o, Option) else Option(*o) for o in options)
    keys = (key,) if key else ()
    return QuestionDescriptor(question, QuestionKind.MULTI_CHOICE, keys=keys, options=opts, follow_up=follow_up)


def composite(
    question: str,
    fields: Iterable[SubField | tuple[str, str]],
    suffix: str = "",
) -> QuestionDescriptor:
    subs = tuple(f if isinstance(f, SubField) else SubField(f[0], f[1], suffix=suffix) for f in fields)
    return QuestionDescriptor(question, QuestionKind.COMPOSITE, keys=tuple(s.key for s in subs), fields=subs)


def table(question: str, spec: TableSpec) -> QuestionDescriptor:
    return QuestionDescriptor(question, QuestionKind.TABLE, table=spec)


def when(*values: str, then: Iterable[QuestionDescriptor]) -> FollowUp:
    return FollowUp(Trigger(frozenset(values)), tuple(then))


def when_any(then: Iterable[QuestionDescriptor]) -> FollowUp:
    return FollowUp(Trigger(None), tuple(then))


def when_yes(*then: QuestionDescriptor) -> FollowUp:
    return when("yes", then=then)
