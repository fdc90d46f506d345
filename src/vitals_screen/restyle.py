"""Reglas de énfasis: valor destacado, unidades y símbolos secundarios."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from vitals_screen.attributed import (
    Attribute,
    AttributedText,
    MeasurementPart,
    NumberPart,
    NumberSymbol,
    StyledRun,
    StyledText,
    StyleTag,
)


@dataclass(frozen=True)
class StyleRule:
    """Assign ``style`` to every run carrying ``attribute``."""

    attribute: Attribute
    style: StyleTag


# Applied in order; a later rule overrides an earlier one on the same run.
VITAL_STYLE_RULES: tuple[StyleRule, ...] = (
    StyleRule(NumberSymbol.PERCENT, StyleTag.SECONDARY),
    StyleRule(NumberPart.INTEGER, StyleTag.EMPHASIZED),
    StyleRule(MeasurementPart.VALUE, StyleTag.EMPHASIZED),
    StyleRule(MeasurementPart.UNIT, StyleTag.SECONDARY),
)


def restyle(
    text: AttributedText,
    rules: Sequence[StyleRule] = VITAL_STYLE_RULES,
    default: StyleTag = StyleTag.SECONDARY,
) -> StyledText:
    """Resolve one style per run from its semantic attributes.

    Args:
        text: Output of the formatter.
        rules: Ordered rules; each pass may overwrite styles set before it.
        default: Style for runs no rule matched.

    Returns:
        Styled runs, adjacent runs with the same style merged.
    """
    styles: list[StyleTag | None] = [None] * len(text.runs)
    for rule in rules:
        for i, run in enumerate(text.runs):
            if rule.attribute in run.attributes:
                styles[i] = rule.style

    merged: list[StyledRun] = []
    for run, style in zip(text.runs, styles):
        if not run.text:
            continue
        resolved = style if style is not None else default
        if merged and merged[-1].style is resolved:
            merged[-1] = StyledRun(merged[-1].text + run.text, resolved)
        else:
            merged.append(StyledRun(run.text, resolved))
    return StyledText(tuple(merged))
