"""Conversión de texto estilizado a markup de Kivy."""

from __future__ import annotations

from dataclasses import dataclass

from vitals_screen.attributed import StyledText, StyleTag
from vitals_screen.model import AccentColor


@dataclass(frozen=True)
class TextStyle:
    """Presentation token for one emphasis tier."""

    size: str
    bold: bool
    color: str


PRIMARY_COLOR = "#1c1c1e"
SECONDARY_COLOR = "#8a8a8e"

STYLE_TOKENS: dict[StyleTag, TextStyle] = {
    StyleTag.EMPHASIZED: TextStyle(size="28sp", bold=True, color=PRIMARY_COLOR),
    StyleTag.SECONDARY: TextStyle(size="17sp", bold=False, color=SECONDARY_COLOR),
}

ACCENT_COLORS: dict[AccentColor, str] = {
    AccentColor.BLUE: "#007aff",
    AccentColor.RED: "#ff3b30",
    AccentColor.GREEN: "#34c759",
    AccentColor.ORANGE: "#ff9500",
    AccentColor.PURPLE: "#af52de",
}


def escape_markup(text: str) -> str:
    """Escape the characters Kivy markup treats as syntax."""
    # Same replacements as kivy.utils.escape_markup.
    return text.replace("&", "&amp;").replace("[", "&bl;").replace("]", "&br;")


def styled_run_markup(text: str, style: TextStyle) -> str:
    body = escape_markup(text)
    if style.bold:
        body = f"[b]{body}[/b]"
    return f"[size={style.size}][color={style.color}]{body}[/color][/size]"


def to_markup(
    styled: StyledText, tokens: dict[StyleTag, TextStyle] | None = None
) -> str:
    """Render styled runs as one Kivy markup string.

    Args:
        styled: Output of ``restyle``.
        tokens: Style tokens per tag (defaults to ``STYLE_TOKENS``).

    Returns:
        Markup for a ``Label`` with ``markup=True``.
    """
    table = tokens or STYLE_TOKENS
    return "".join(styled_run_markup(run.text, table[run.style]) for run in styled.runs)
