"""Shared pytest fixtures for the looping timer tests."""

import random

import pytest
from PySide6.QtCore import QCoreApplication, QObject, Signal
from PySide6.QtMultimedia import QSoundEffect

from looptimer.config import ConfigController
from looptimer.scheduler import CycleScheduler


class FakeClock(QObject):
    """Tick source driven by hand instead of a QTimer."""

    tick = Signal(float)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.active = False
        self.startCalls = 0
        self.stopCalls = 0

    def isActive(self):
        return self.active

    def start(self):
        if self.active:
            return
        self.startCalls += 1
        self.active = True

    def stop(self):
        self.stopCalls += 1
        self.active = False

    def advance(self, seconds=1):
        """Fire one tick per second, like the real timer would while active."""
        for _ in range(seconds):
            if self.active:
                self.tick.emit(1.0)


class FakeSoundEffect(QObject):
    """Stand-in for QSoundEffect that never touches an audio device."""

    statusChanged = Signal()
    created = []

    def __init__(self, parent=None):
        super().__init__(parent)
        self.source = None
        self.volume = None
        self.playing = False
        self.stopped = False
        self._status = QSoundEffect.Status.Ready
        FakeSoundEffect.created.append(self)

    def setSource(self, url):
        self.source = url

    def setVolume(self, volume):
        self.volume = volume

    def play(self):
        self.playing = True

    def stop(self):
        self.playing = False
        self.stopped = True

    def isPlaying(self):
        return self.playing

    def status(self):
        return self._status

    def fail(self):
        self._status = QSoundEffect.Status.Error
        self.statusChanged.emit()


class SignalRecorder:
    """Collects every emission of the signals it is attached to."""

    def __init__(self):
        self.events = []

    def attach(self, signal, name):
        signal.connect(lambda *args: self.events.append((name, *args)))

    def named(self, name):
        return [event[1:] for event in self.events if event[0] == name]

    def clear(self):
        self.events.clear()


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One Qt core application for the whole session."""
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def config():
    return ConfigController()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(config, rng, clock):
    return CycleScheduler(config, rng, clock)


@pytest.fixture
def recorder(scheduler):
    recorder = SignalRecorder()
    recorder.attach(scheduler.countdownChanged, "countdown")
    recorder.attach(scheduler.effectsFired, "effects")
    recorder.attach(scheduler.effectsReset, "reset")
    recorder.attach(scheduler.validationFailed, "invalid")
    recorder.attach(scheduler.runningChanged, "running")
    return recorder


@pytest.fixture
def fakeEffects():
    FakeSoundEffect.created = []
    return FakeSoundEffect.created


@pytest.fixture
def effectFactory(fakeEffects):
    return FakeSoundEffect


@pytest.fixture
def signalRecorder():
    return SignalRecorder


@pytest.fixture
def clockFactory():
    return FakeClock
