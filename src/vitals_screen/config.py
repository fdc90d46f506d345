"""Configuración de la pantalla desde la línea de comandos."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from babel import Locale, UnknownLocaleError
from dateutil import tz

from vitals_screen.formatter import DEFAULT_LOCALE
from vitals_screen.screen import Platform

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class ScreenConfig:
    """Runtime configuration for the vitals screen."""

    locale: str = DEFAULT_LOCALE
    # None: detect from kivy.utils.platform at startup.
    platform: Platform | None = None
    time_zone: str = "Asia/Tokyo"
    font_path: str | None = None
    log_level: str = "INFO"


def _locale_arg(raw: str) -> str:
    try:
        return str(Locale.parse(raw))
    except (UnknownLocaleError, ValueError) as exc:
        raise argparse.ArgumentTypeError(f"locale desconocido: {raw}") from exc


def _time_zone_arg(raw: str) -> str:
    if tz.gettz(raw) is None:
        raise argparse.ArgumentTypeError(f"zona horaria desconocida: {raw}")
    return raw


def parse_args(argv: Sequence[str] | None = None) -> ScreenConfig:
    """Parse command-line arguments into a ``ScreenConfig``.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``).

    Returns:
        Parsed configuration.
    """
    defaults = ScreenConfig()
    parser = argparse.ArgumentParser(
        description="Pantalla de signos vitales (datos de ejemplo)."
    )
    parser.add_argument(
        "--locale",
        type=_locale_arg,
        default=defaults.locale,
        help=f"Locale para números y unidades (default: {defaults.locale}).",
    )
    parser.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        default=None,
        help="Forzar plataforma (tvos/watchos usan lista; el resto tarjetas).",
    )
    parser.add_argument(
        "--time-zone",
        type=_time_zone_arg,
        default=defaults.time_zone,
        help=f"Zona horaria de referencia (default: {defaults.time_zone}).",
    )
    parser.add_argument(
        "--font",
        dest="font_path",
        default=None,
        help="Fuente TTF con glifos CJK para los títulos.",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default=defaults.log_level,
    )
    ns = parser.parse_args(argv)
    return ScreenConfig(
        locale=ns.locale,
        platform=Platform(ns.platform) if ns.platform else None,
        time_zone=ns.time_zone,
        font_path=ns.font_path,
        log_level=ns.log_level,
    )
