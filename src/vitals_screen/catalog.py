"""Datos de ejemplo para la pantalla de signos vitales."""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil import tz

from vitals_screen.model import (
    AccentColor,
    Count,
    Duration,
    Percent,
    Temperature,
    TemperatureUnit,
    VitalRecord,
)

_LOCAL_TZ = tz.gettz("Asia/Tokyo")

SCREEN_TITLE = "バイタルデータ"


def sample_vitals(now: datetime) -> tuple[VitalRecord, ...]:
    """Build the sample records, observed at fixed offsets before ``now``."""
    return (
        VitalRecord(
            title="取り込まれた酸素のレベル",
            value=Percent(0.99),
            observed_at=now - timedelta(seconds=300),
            icon_token="o.circle.fill",
            accent_color=AccentColor.BLUE,
        ),
        VitalRecord(
            title="心拍数",
            value=Count(61, unit_label="拍/分"),
            observed_at=now - timedelta(seconds=5400),
            icon_token="heart.fill",
            accent_color=AccentColor.RED,
        ),
        VitalRecord(
            title="睡眠",
            value=Duration(451 * 60),
            observed_at=now - timedelta(seconds=87000),
            icon_token="bed.double.fill",
            accent_color=AccentColor.GREEN,
        ),
        VitalRecord(
            title="体温",
            value=Temperature(36.4, TemperatureUnit.CELSIUS),
            observed_at=now - timedelta(seconds=172800),
            icon_token="thermometer",
            accent_color=AccentColor.RED,
        ),
    )


VITAL_DATA: tuple[VitalRecord, ...] = sample_vitals(datetime.now(tz=_LOCAL_TZ))
