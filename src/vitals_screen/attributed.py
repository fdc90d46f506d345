"""Texto con atributos semánticos y texto estilizado."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class NumberPart(Enum):
    """Digit groups of a formatted number."""

    INTEGER = "integer"
    FRACTION = "fraction"


class NumberSymbol(Enum):
    """Non-digit symbols of a formatted number."""

    PERCENT = "percent"
    DECIMAL_SEPARATOR = "decimal_separator"
    GROUPING_SEPARATOR = "grouping_separator"
    SIGN = "sign"


class MeasurementPart(Enum):
    """Roles inside a formatted measurement."""

    VALUE = "value"
    UNIT = "unit"


class DurationField(Enum):
    """Calendar field a duration component belongs to."""

    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"


Attribute = NumberPart | NumberSymbol | MeasurementPart | DurationField


@dataclass(frozen=True)
class AttributedRun:
    """A run of text sharing one set of attributes."""

    text: str
    attributes: frozenset[Attribute] = frozenset()


@dataclass(frozen=True)
class AttributedText:
    """Formatted text split into attributed runs."""

    runs: tuple[AttributedRun, ...] = ()

    @classmethod
    def plain(cls, text: str) -> AttributedText:
        """Text without any attribute."""
        return cls((AttributedRun(text),)) if text else cls()

    @classmethod
    def tagged(cls, text: str, *attributes: Attribute) -> AttributedText:
        """Text carrying ``attributes`` on every character."""
        return cls((AttributedRun(text, frozenset(attributes)),)) if text else cls()

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)

    def with_attributes(self, *attributes: Attribute) -> AttributedText:
        """Add ``attributes`` to every run."""
        extra = frozenset(attributes)
        return AttributedText(
            tuple(AttributedRun(r.text, r.attributes | extra) for r in self.runs)
        )

    def ranges(self, attribute: Attribute) -> list[tuple[int, int]]:
        """Character ranges ``[start, end)`` carrying ``attribute`` (merged)."""
        out: list[tuple[int, int]] = []
        pos = 0
        for run in self.runs:
            end = pos + len(run.text)
            if attribute in run.attributes:
                if out and out[-1][1] == pos:
                    out[-1] = (out[-1][0], end)
                else:
                    out.append((pos, end))
            pos = end
        return out

    def __add__(self, other: AttributedText) -> AttributedText:
        return AttributedText(self.runs + other.runs)


def concat(parts: Iterable[AttributedText]) -> AttributedText:
    """Join attributed pieces in order."""
    runs: list[AttributedRun] = []
    for part in parts:
        runs.extend(part.runs)
    return AttributedText(tuple(runs))


class StyleTag(Enum):
    """Two-tier emphasis used by the vitals screen."""

    EMPHASIZED = "emphasized"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class StyledRun:
    """A run of text with its resolved style."""

    text: str
    style: StyleTag


@dataclass(frozen=True)
class StyledText:
    """Ordered (text, style) runs consumed by the renderer."""

    runs: tuple[StyledRun, ...] = ()

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)

    def style_at(self, index: int) -> StyleTag:
        """Style of the character at ``index``.

        Raises:
            IndexError: If ``index`` is outside the text.
        """
        pos = 0
        for run in self.runs:
            end = pos + len(run.text)
            if pos <= index < end:
                return run.style
            pos = end
        raise IndexError(index)

    def texts_with(self, style: StyleTag) -> list[str]:
        """Text of every run with ``style``, in order."""
        return [run.text for run in self.runs if run.style is style]
