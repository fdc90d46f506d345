"""Modelos tipados para los registros de signos vitales."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from vitals_screen.units import Dimension, UnitTemperature


class AccentColor(str, Enum):
    """Display color tokens for a vital's title."""

    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    ORANGE = "orange"
    PURPLE = "purple"


class TemperatureUnit(str, Enum):
    """Temperature units known to the formatter (Babel unit keys)."""

    CELSIUS = "temperature-celsius"
    FAHRENHEIT = "temperature-fahrenheit"
    KELVIN = "temperature-kelvin"

    @property
    def dimension(self) -> Dimension:
        """Matching converter dimension in ``UnitTemperature``."""
        return {
            TemperatureUnit.CELSIUS: UnitTemperature.CELSIUS,
            TemperatureUnit.FAHRENHEIT: UnitTemperature.FAHRENHEIT,
            TemperatureUnit.KELVIN: UnitTemperature.KELVIN,
        }[self]


class TemperatureUsage(str, Enum):
    """How a temperature is presented."""

    AS_PROVIDED = "as_provided"
    # Converted to the preferred unit of the locale's territory.
    PERSON = "person"


@dataclass(frozen=True)
class Percent:
    """Ratio in [0, 1] shown as a percentage."""

    ratio: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.ratio <= 1.0:
            raise ValueError(f"Percent ratio must be within [0, 1], got {self.ratio}")


@dataclass(frozen=True)
class Count:
    """Integer amount with a free-form unit label (formatting not supported)."""

    amount: int
    unit_label: str


@dataclass(frozen=True)
class Duration:
    """Elapsed time in seconds."""

    seconds: float

    def __post_init__(self) -> None:
        if self.seconds < 0:
            raise ValueError(f"Duration must not be negative, got {self.seconds}")


@dataclass(frozen=True)
class Temperature:
    """Temperature measurement."""

    magnitude: float
    unit: TemperatureUnit
    usage: TemperatureUsage = TemperatureUsage.AS_PROVIDED


VitalValue = Percent | Count | Duration | Temperature


@dataclass(frozen=True)
class VitalRecord:
    """One observed health metric with its display metadata."""

    title: str
    value: VitalValue
    observed_at: datetime
    icon_token: str
    accent_color: AccentColor
    identity: UUID = field(default_factory=uuid4)
