from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta

import pytest
from dateutil import tz

from vitals_screen.catalog import VITAL_DATA, sample_vitals
from vitals_screen.model import (
    AccentColor,
    Count,
    Duration,
    Percent,
    Temperature,
    TemperatureUnit,
    TemperatureUsage,
)

_NOW = datetime(2026, 10, 19, 9, 0, tzinfo=tz.gettz("Asia/Tokyo"))


def test_sample_vitals_order_and_values() -> None:
    records = sample_vitals(_NOW)
    assert [r.title for r in records] == [
        "取り込まれた酸素のレベル",
        "心拍数",
        "睡眠",
        "体温",
    ]
    assert records[0].value == Percent(0.99)
    assert records[1].value == Count(61, "拍/分")
    assert records[2].value == Duration(27060)
    assert records[3].value == Temperature(36.4, TemperatureUnit.CELSIUS)
    assert records[3].value.usage is TemperatureUsage.AS_PROVIDED
    assert [r.accent_color for r in records] == [
        AccentColor.BLUE,
        AccentColor.RED,
        AccentColor.GREEN,
        AccentColor.RED,
    ]


def test_sample_vitals_observed_in_the_past() -> None:
    records = sample_vitals(_NOW)
    offsets = [_NOW - r.observed_at for r in records]
    assert offsets == [
        timedelta(seconds=300),
        timedelta(seconds=5400),
        timedelta(seconds=87000),
        timedelta(days=2),
    ]


def test_identities_are_unique() -> None:
    records = sample_vitals(_NOW)
    assert len({r.identity for r in records}) == len(records)


def test_module_catalog_is_immutable() -> None:
    assert isinstance(VITAL_DATA, tuple)
    assert len(VITAL_DATA) == 4
    assert all(r.observed_at.tzinfo is not None for r in VITAL_DATA)
    with pytest.raises(dataclasses.FrozenInstanceError):
        VITAL_DATA[0].value = Percent(0.5)  # type: ignore[misc]


def test_model_validation() -> None:
    with pytest.raises(ValueError):
        Percent(1.5)
    with pytest.raises(ValueError):
        Percent(-0.1)
    with pytest.raises(ValueError):
        Duration(-1)
