"""Tests for platform layout and item view models."""

from __future__ import annotations

from datetime import datetime

import pytest
from dateutil import tz

from vitals_screen.attributed import StyleTag
from vitals_screen.catalog import sample_vitals
from vitals_screen.formatter import COUNT_FALLBACK
from vitals_screen.screen import (
    LayoutStyle,
    Platform,
    build_items,
    layout_for,
    platform_from_kivy,
)

_NOW = datetime(2026, 10, 19, 9, 0, tzinfo=tz.gettz("Asia/Tokyo"))


@pytest.mark.parametrize(
    ("platform", "expected"),
    [
        (Platform.TVOS, LayoutStyle.LIST),
        (Platform.WATCHOS, LayoutStyle.LIST),
        (Platform.IOS, LayoutStyle.CARDS),
        (Platform.MACOS, LayoutStyle.CARDS),
        (Platform.LINUX, LayoutStyle.CARDS),
    ],
)
def test_layout_for(platform: Platform, expected: LayoutStyle) -> None:
    assert layout_for(platform) is expected


def test_platform_from_kivy() -> None:
    assert platform_from_kivy("macosx") is Platform.MACOS
    assert platform_from_kivy("win") is Platform.WINDOWS
    assert platform_from_kivy("unknown") is Platform.LINUX


def test_build_items_cards() -> None:
    records = sample_vitals(_NOW)
    items = build_items(records, locale="en_US", now=_NOW, layout=LayoutStyle.CARDS)

    assert [i.identity for i in items] == [r.identity for r in records]
    assert all(i.show_chevron for i in items)
    assert items[0].observed_label == "5 minutes ago"
    assert items[1].observed_label == "1 hour ago"
    assert items[2].observed_label == "1 day ago"
    assert items[3].observed_label == "2 days ago"
    assert items[0].value.texts_with(StyleTag.EMPHASIZED) == ["99"]
    assert items[1].value.text == COUNT_FALLBACK


def test_build_items_list_hides_chevron() -> None:
    items = build_items(
        sample_vitals(_NOW), locale="ja_JP", now=_NOW, layout=LayoutStyle.LIST
    )
    assert not any(i.show_chevron for i in items)
    assert items[2].value.texts_with(StyleTag.EMPHASIZED) == ["7", "31"]
