"""Conversores de unidades: lineales y recíprocos."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


class UnitConverter(ABC):
    """Conversion law between a unit and its dimension's base unit."""

    @abstractmethod
    def to_base(self, value: float) -> float:
        """Convert a value in this unit to the base unit."""

    @abstractmethod
    def from_base(self, base_value: float) -> float:
        """Convert a base-unit value to this unit."""


@dataclass(frozen=True)
class LinearConverter(UnitConverter):
    """Affine law: ``base = value * coefficient + constant``."""

    coefficient: float
    constant: float = 0.0

    def to_base(self, value: float) -> float:
        return value * self.coefficient + self.constant

    def from_base(self, base_value: float) -> float:
        return (base_value - self.constant) / self.coefficient


@dataclass(frozen=True)
class InverseConverter(UnitConverter):
    """Reciprocal law: ``base = coefficient / value`` (and the same way back).

    Zero inputs are not guarded: the division follows IEEE-754 and yields
    ``inf`` instead of raising. Callers validate their inputs.
    """

    coefficient: float

    def __post_init__(self) -> None:
        if self.coefficient == 0:
            raise ValueError("InverseConverter coefficient must be non-zero")

    def to_base(self, value: float) -> float:
        return _ieee_divide(self.coefficient, value)

    def from_base(self, base_value: float) -> float:
        return _ieee_divide(self.coefficient, base_value)


def _ieee_divide(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


@dataclass(frozen=True)
class Dimension:
    """A unit symbol plus the converter to its base unit."""

    symbol: str
    converter: UnitConverter


def convert(value: float, source: Dimension, target: Dimension) -> float:
    """Convert ``value`` between two units of the same dimension.

    Args:
        value: Magnitude expressed in ``source``.
        source: Unit of ``value``.
        target: Unit to convert to.

    Returns:
        The magnitude expressed in ``target``.
    """
    if source == target:
        return value
    return target.converter.from_base(source.converter.to_base(value))


class UnitSpeed:
    """Speed units; base unit is meters per second."""

    METERS_PER_SECOND = Dimension("m/s", LinearConverter(1.0))
    KILOMETERS_PER_HOUR = Dimension("km/h", LinearConverter(1000.0 / 3600.0))
    MINUTES_PER_KILOMETER = Dimension("min/km", InverseConverter(1000.0 / 60.0))


class UnitTemperature:
    """Temperature units; base unit is kelvin."""

    KELVIN = Dimension("K", LinearConverter(1.0))
    CELSIUS = Dimension("°C", LinearConverter(1.0, 273.15))
    FAHRENHEIT = Dimension("°F", LinearConverter(5.0 / 9.0, 459.67 * 5.0 / 9.0))
