"""Disposición de la pantalla según plataforma y modelos de cada ítem."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from babel import Locale

from vitals_screen.attributed import StyledText
from vitals_screen.formatter import DEFAULT_LOCALE, format_observed, format_value
from vitals_screen.model import AccentColor, VitalRecord
from vitals_screen.restyle import restyle


class Platform(str, Enum):
    """Platforms the screen adapts to."""

    IOS = "ios"
    MACOS = "macos"
    MAC_CATALYST = "mac_catalyst"
    TVOS = "tvos"
    WATCHOS = "watchos"
    ANDROID = "android"
    LINUX = "linux"
    WINDOWS = "windows"


class LayoutStyle(Enum):
    """List rows on constrained platforms, scrolling cards elsewhere."""

    LIST = "list"
    CARDS = "cards"


_LIST_PLATFORMS = frozenset({Platform.TVOS, Platform.WATCHOS})

# kivy.utils.platform -> Platform
_KIVY_PLATFORMS: dict[str, Platform] = {
    "ios": Platform.IOS,
    "macosx": Platform.MACOS,
    "android": Platform.ANDROID,
    "linux": Platform.LINUX,
    "win": Platform.WINDOWS,
}


def layout_for(platform: Platform) -> LayoutStyle:
    return LayoutStyle.LIST if platform in _LIST_PLATFORMS else LayoutStyle.CARDS


def platform_from_kivy(name: str) -> Platform:
    """Map a ``kivy.utils.platform`` name; unknown names count as Linux."""
    return _KIVY_PLATFORMS.get(name, Platform.LINUX)


@dataclass(frozen=True)
class VitalItem:
    """Everything the renderer needs for one vital row or card."""

    identity: UUID
    title: str
    icon_token: str
    accent_color: AccentColor
    observed_label: str
    value: StyledText
    show_chevron: bool


def build_item(
    record: VitalRecord,
    *,
    locale: Locale | str = DEFAULT_LOCALE,
    now: datetime,
    layout: LayoutStyle,
) -> VitalItem:
    return VitalItem(
        identity=record.identity,
        title=record.title,
        icon_token=record.icon_token,
        accent_color=record.accent_color,
        observed_label=format_observed(record.observed_at, now, locale),
        value=restyle(format_value(record.value, locale)),
        show_chevron=layout is LayoutStyle.CARDS,
    )


def build_items(
    records: Iterable[VitalRecord],
    *,
    locale: Locale | str = DEFAULT_LOCALE,
    now: datetime,
    layout: LayoutStyle,
) -> list[VitalItem]:
    """Item view models in catalog order.

    Args:
        records: Vital records to show.
        locale: Locale for values and relative times.
        now: Reference time for the "time ago" labels.
        layout: Active layout; cards show a disclosure chevron.

    Returns:
        One item per record.
    """
    return [build_item(r, locale=locale, now=now, layout=layout) for r in records]
