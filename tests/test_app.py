"""Tests for application wiring and the command line."""

import json

import pytest

from looptimer.__main__ import applyArguments, buildParser
from looptimer.app import LoopingTimerApp


@pytest.fixture
def app(effectFactory):
    app = LoopingTimerApp(seed=3, maxCycles=2)
    app.soundManager.effectFactory = effectFactory
    yield app
    app.scheduler.shutdown()


def test_arguments_flow_into_config(app):
    arguments = buildParser().parse_args(
        ["--min", "2", "--max", "4", "--sounds", "3", "--colors", "5", "--arrow", "--hide-countdown"]
    )

    applyArguments(app, arguments)
    settings = app.config.snapshot()

    assert settings.minSeconds == "2"
    assert settings.maxSeconds == "4"
    assert settings.soundIntensity == "3"
    assert settings.colorIntensity == "5"
    assert settings.arrowEnabled is True
    assert settings.showCountdown is False


def test_unset_arguments_keep_defaults(app):
    applyArguments(app, buildParser().parse_args([]))

    assert app.config.getMinSeconds() == "10"
    assert app.config.getArrowEnabled() is False


def test_config_file_is_used(tmp_path, effectFactory):
    overrides = tmp_path / "timer.json"
    overrides.write_text(json.dumps({"effects": {"colorIntensity": 4}}), encoding="utf-8")

    app = LoopingTimerApp(configFile=overrides)

    assert app.config.getColorIntensity() == 4


def test_invalid_range_fails_fast(app):
    app.config.setMinSeconds("20")
    app.config.setMaxSeconds("10")

    assert app.startLoop() == 1
    assert not app.scheduler.isRunning


def test_cycle_limit_schedules_shutdown(app):
    app.config.setMinSeconds(1)
    app.config.setMaxSeconds(1)
    app.scheduler.start()

    app.scheduler._onTick()
    assert not app.isShuttingDown

    app.scheduler._onTick()
    assert app.isShuttingDown
    assert app.scheduler.cycleCount == 2


def test_going_idle_on_its_own_exits_with_error(app):
    app.config.setMinSeconds(1)
    app.config.setMaxSeconds(1)
    app.scheduler.start()

    app.config.setMinSeconds(5)
    app.scheduler._onTick()

    assert not app.scheduler.isRunning
    assert app.exitCode == 1
    assert app.isShuttingDown
