"""Tests for configuration parsing and the entry point."""

from __future__ import annotations

import pytest

from vitals_screen import __main__ as entry
from vitals_screen.config import ScreenConfig, parse_args
from vitals_screen.screen import Platform


def test_parse_args_defaults() -> None:
    assert parse_args([]) == ScreenConfig()


def test_parse_args_custom_values() -> None:
    config = parse_args(
        [
            "--locale",
            "en_US",
            "--platform",
            "tvos",
            "--time-zone",
            "Europe/Madrid",
            "--font",
            "/fonts/NotoSansJP.ttf",
            "--log-level",
            "DEBUG",
        ]
    )
    assert config.locale == "en_US"
    assert config.platform is Platform.TVOS
    assert config.time_zone == "Europe/Madrid"
    assert config.font_path == "/fonts/NotoSansJP.ttf"
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "argv",
    [
        ["--locale", "xx_QQ"],
        ["--time-zone", "Nowhere/Special"],
        ["--platform", "amiga"],
    ],
)
def test_parse_args_rejects_invalid_values(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_main_runs_app(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, ScreenConfig] = {}

    def _run_app(config: ScreenConfig) -> int:
        captured["config"] = config
        return 0

    monkeypatch.setattr("vitals_screen.app.run_app", _run_app)
    assert entry.main(["--locale", "en_US"]) == 0
    assert captured["config"].locale == "en_US"


def test_main_reports_missing_gui(monkeypatch: pytest.MonkeyPatch) -> None:
    def _run_app(_: ScreenConfig) -> int:
        raise ImportError("No module named 'kivy'")

    monkeypatch.setattr("vitals_screen.app.run_app", _run_app)
    assert entry.main([]) == 1
