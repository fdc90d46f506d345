from __future__ import annotations

from vitals_screen.attributed import StyledRun, StyledText, StyleTag
from vitals_screen.markup import TextStyle, escape_markup, to_markup


def test_escape_markup() -> None:
    assert escape_markup("[b]&") == "&bl;b&br;&amp;"


def test_to_markup_default_tokens() -> None:
    styled = StyledText(
        (StyledRun("99", StyleTag.EMPHASIZED), StyledRun("%", StyleTag.SECONDARY))
    )
    assert to_markup(styled) == (
        "[size=28sp][color=#1c1c1e][b]99[/b][/color][/size]"
        "[size=17sp][color=#8a8a8e]%[/color][/size]"
    )


def test_to_markup_custom_tokens() -> None:
    tokens = {
        StyleTag.EMPHASIZED: TextStyle(size="40sp", bold=False, color="#ff0000"),
        StyleTag.SECONDARY: TextStyle(size="10sp", bold=True, color="#00ff00"),
    }
    styled = StyledText((StyledRun("[x]", StyleTag.SECONDARY),))
    assert to_markup(styled, tokens) == (
        "[size=10sp][color=#00ff00][b]&bl;x&br;[/b][/color][/size]"
    )


def test_to_markup_empty() -> None:
    assert to_markup(StyledText()) == ""
