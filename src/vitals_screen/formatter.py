"""Formateo localizado de valores vitales a texto con atributos."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from babel import Locale
from babel.dates import format_timedelta
from babel.lists import format_list
from babel.numbers import (
    format_decimal,
    format_percent,
    get_decimal_symbol,
    get_group_symbol,
    get_minus_sign_symbol,
    get_plus_sign_symbol,
)
from babel.units import format_unit
from dateutil.relativedelta import relativedelta

from vitals_screen.attributed import (
    Attribute,
    AttributedRun,
    AttributedText,
    DurationField,
    MeasurementPart,
    NumberPart,
    NumberSymbol,
    concat,
)
from vitals_screen.model import (
    Count,
    Duration,
    Percent,
    Temperature,
    TemperatureUnit,
    TemperatureUsage,
    VitalValue,
)
from vitals_screen.units import convert

_LOG = logging.getLogger(__name__)

DEFAULT_LOCALE = "ja_JP"

# Custom count units are not supported; the screen shows this text instead.
COUNT_FALLBACK = "カスタムUnit諦めました"

_DURATION_UNITS: tuple[tuple[DurationField, str], ...] = (
    (DurationField.HOURS, "duration-hour"),
    (DurationField.MINUTES, "duration-minute"),
    (DurationField.SECONDS, "duration-second"),
)

# Largest first; an elapsed time is shown in the first unit it fills.
_RELATIVE_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 365 * 86400),
    ("month", 30 * 86400),
    ("week", 7 * 86400),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)

# Territories whose person temperatures are read in Fahrenheit.
_FAHRENHEIT_TERRITORIES = frozenset({"US", "BS", "BZ", "KY", "LR", "PR", "PW"})


def format_value(
    value: VitalValue, locale: Locale | str = DEFAULT_LOCALE
) -> AttributedText:
    """Format a vital value for display.

    Args:
        value: One of the ``VitalValue`` variants.
        locale: Babel locale (or identifier) used for numbers and units.

    Returns:
        Formatted text tagged with its semantic parts.

    Raises:
        TypeError: If ``value`` is not a known variant.
    """
    if isinstance(value, Percent):
        return _format_percent(value, locale)
    if isinstance(value, Count):
        _LOG.debug(
            "count formatting unsupported: %s %s", value.amount, value.unit_label
        )
        return AttributedText.plain(COUNT_FALLBACK)
    if isinstance(value, Duration):
        return _format_duration(value, locale)
    if isinstance(value, Temperature):
        return _format_temperature(value, locale)
    raise TypeError(f"Unsupported vital value: {type(value).__name__}")


def format_observed(
    observed_at: datetime, now: datetime, locale: Locale | str = DEFAULT_LOCALE
) -> str:
    """Relative label for an observation time (e.g. "5 minutes ago").

    The elapsed time is truncated to whole units, so 90 minutes reads
    "1 hour ago" rather than being rounded up.
    """
    elapsed = (observed_at - now).total_seconds()
    amount = int(abs(elapsed))
    for _unit, unit_seconds in _RELATIVE_UNITS:
        if amount >= unit_seconds:
            amount -= amount % unit_seconds
            break
    return format_timedelta(
        -amount if elapsed < 0 else amount,
        threshold=1,
        add_direction=True,
        locale=locale,
    )


def preferred_temperature_unit(locale: Locale | str) -> TemperatureUnit:
    """Unit used for person temperatures in the locale's territory."""
    territory = Locale.parse(locale).territory
    if territory in _FAHRENHEIT_TERRITORIES:
        return TemperatureUnit.FAHRENHEIT
    return TemperatureUnit.CELSIUS


def _format_percent(value: Percent, locale: Locale | str) -> AttributedText:
    return _number_runs(format_percent(value.ratio, locale=locale), locale)


def _format_duration(value: Duration, locale: Locale | str) -> AttributedText:
    """Hours/minutes/seconds breakdown, zero components hidden."""
    delta = relativedelta(seconds=round(value.seconds))
    amounts = {
        DurationField.HOURS: delta.days * 24 + delta.hours,
        DurationField.MINUTES: delta.minutes,
        DurationField.SECONDS: delta.seconds,
    }
    pieces = [
        _measurement(amounts[field], unit_key, "short", locale, field)
        for field, unit_key in _DURATION_UNITS
        if amounts[field]
    ]
    if not pieces:
        pieces = [
            _measurement(0, "duration-second", "short", locale, DurationField.SECONDS)
        ]
    joined = format_list([p.text for p in pieces], style="unit-short", locale=locale)
    return _splice(joined, pieces, AttributedText.plain)


def _format_temperature(value: Temperature, locale: Locale | str) -> AttributedText:
    unit = value.unit
    magnitude = value.magnitude
    if value.usage is TemperatureUsage.PERSON:
        preferred = preferred_temperature_unit(locale)
        magnitude = round(convert(magnitude, unit.dimension, preferred.dimension), 1)
        unit = preferred
    return _measurement(magnitude, unit.value, "narrow", locale)


def _measurement(
    amount: float,
    unit_key: str,
    length: str,
    locale: Locale | str,
    *attributes: Attribute,
) -> AttributedText:
    """Format ``amount`` with a Babel unit, tagging value and unit text."""
    number = format_decimal(amount, locale=locale)
    full = format_unit(amount, unit_key, length=length, locale=locale)
    if unit_key in full and length != "short":
        # Babel falls back to the raw unit key when a width has no pattern.
        full = format_unit(amount, unit_key, length="short", locale=locale)
    value_part = _number_runs(number, locale).with_attributes(
        MeasurementPart.VALUE, *attributes
    )
    return _splice(full, [value_part], lambda gap: _unit_runs(gap, *attributes))


def _unit_runs(text: str, *attributes: Attribute) -> AttributedText:
    core = text.strip()
    if not core:
        return AttributedText.tagged(text, *attributes)
    lead = text[: len(text) - len(text.lstrip())]
    trail = text[len(text.rstrip()) :]
    return (
        AttributedText.tagged(lead, *attributes)
        + AttributedText.tagged(core, MeasurementPart.UNIT, *attributes)
        + AttributedText.tagged(trail, *attributes)
    )


def _splice(
    full: str,
    pieces: Sequence[AttributedText],
    gap: Callable[[str], AttributedText],
) -> AttributedText:
    """Locate ``pieces`` in order inside ``full``; text between them goes to ``gap``."""
    parts: list[AttributedText] = []
    cursor = 0
    for piece in pieces:
        start = full.find(piece.text, cursor)
        if start < 0:
            _LOG.warning("formatted piece %r not found in %r", piece.text, full)
            return AttributedText.plain(full)
        parts.append(gap(full[cursor:start]))
        parts.append(piece)
        cursor = start + len(piece.text)
    parts.append(gap(full[cursor:]))
    return concat(parts)


def _number_runs(text: str, locale: Locale | str) -> AttributedText:
    """Tag the digits and symbols of a Babel-formatted number."""
    percent_sign = Locale.parse(locale).number_symbols["latn"].get("percentSign", "%")
    symbols = (
        (get_decimal_symbol(locale), NumberSymbol.DECIMAL_SEPARATOR),
        (get_group_symbol(locale), NumberSymbol.GROUPING_SEPARATOR),
        (percent_sign, NumberSymbol.PERCENT),
        (get_plus_sign_symbol(locale), NumberSymbol.SIGN),
        (get_minus_sign_symbol(locale), NumberSymbol.SIGN),
    )
    runs: list[AttributedRun] = []
    in_fraction = False
    i = 0
    while i < len(text):
        if text[i].isdigit():
            part = NumberPart.FRACTION if in_fraction else NumberPart.INTEGER
            runs.append(AttributedRun(text[i], frozenset({part})))
            i += 1
            continue
        for symbol, attr in symbols:
            if not symbol or not text.startswith(symbol, i):
                continue
            if attr in _SEPARATORS and not _between_digits(text, i, len(symbol)):
                continue
            attrs: set[Attribute] = {attr}
            if attr is NumberSymbol.DECIMAL_SEPARATOR:
                in_fraction = True
            elif attr is NumberSymbol.GROUPING_SEPARATOR:
                attrs.add(NumberPart.INTEGER)
            runs.append(AttributedRun(symbol, frozenset(attrs)))
            i += len(symbol)
            break
        else:
            runs.append(AttributedRun(text[i]))
            i += 1
    return _coalesce(runs)


_SEPARATORS = frozenset(
    {NumberSymbol.DECIMAL_SEPARATOR, NumberSymbol.GROUPING_SEPARATOR}
)


def _between_digits(text: str, start: int, length: int) -> bool:
    end = start + length
    if start == 0 or end >= len(text):
        return False
    return text[start - 1].isdigit() and text[end].isdigit()


def _coalesce(runs: list[AttributedRun]) -> AttributedText:
    merged: list[AttributedRun] = []
    for run in runs:
        if merged and merged[-1].attributes == run.attributes:
            merged[-1] = AttributedRun(merged[-1].text + run.text, run.attributes)
        else:
            merged.append(run)
    return AttributedText(tuple(merged))
