from __future__ import annotations

from vitals_screen.attributed import (
    AttributedRun,
    AttributedText,
    MeasurementPart,
    NumberPart,
    NumberSymbol,
    StyledRun,
    StyledText,
    StyleTag,
)
from vitals_screen.restyle import VITAL_STYLE_RULES, StyleRule, restyle


def _sample() -> AttributedText:
    return AttributedText(
        (
            AttributedRun("12", frozenset({NumberPart.INTEGER})),
            AttributedRun("%", frozenset({NumberSymbol.PERCENT})),
            AttributedRun(" ", frozenset()),
            AttributedRun(
                "both", frozenset({MeasurementPart.VALUE, MeasurementPart.UNIT})
            ),
            AttributedRun("pi", frozenset({NumberSymbol.PERCENT, NumberPart.INTEGER})),
        )
    )


def test_later_rules_override_earlier_ones() -> None:
    styled = restyle(_sample())
    assert styled == StyledText(
        (
            StyledRun("12", StyleTag.EMPHASIZED),
            StyledRun("% both", StyleTag.SECONDARY),
            StyledRun("pi", StyleTag.EMPHASIZED),
        )
    )


def test_rule_order_decides_overlap() -> None:
    styled = restyle(_sample(), rules=tuple(reversed(VITAL_STYLE_RULES)))
    assert styled.style_at(4) is StyleTag.EMPHASIZED
    assert styled.style_at(8) is StyleTag.SECONDARY
    assert styled.texts_with(StyleTag.EMPHASIZED) == ["12", "both"]


def test_unmatched_runs_take_default_style() -> None:
    styled = restyle(_sample(), rules=(), default=StyleTag.EMPHASIZED)
    assert styled.runs == (StyledRun("12% bothpi", StyleTag.EMPHASIZED),)


def test_custom_rule() -> None:
    rules = (StyleRule(NumberSymbol.PERCENT, StyleTag.EMPHASIZED),)
    styled = restyle(_sample(), rules=rules)
    assert styled.texts_with(StyleTag.EMPHASIZED) == ["%", "pi"]


def test_empty_text() -> None:
    assert restyle(AttributedText()).runs == ()
