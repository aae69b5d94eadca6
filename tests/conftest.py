import importlib
import sys

import pytest


class FakeSoundDevice:
    """Stands in for the sounddevice module so playback runs without PortAudio."""

    def __init__(self):
        self.played = []
        self.waits = 0
        self.stops = 0

    def play(self, data, samplerate=None, blocking=False):
        self.played.append((data, samplerate, blocking))

    def wait(self):
        self.waits += 1

    def stop(self):
        self.stops += 1


@pytest.fixture
def fake_sd(monkeypatch):
    fake = FakeSoundDevice()
    monkeypatch.setitem(sys.modules, 'sounddevice', fake)
    monkeypatch.delitem(sys.modules, 'waver.playback', raising=False)
    importlib.import_module('waver.playback')
    return fake


@pytest.fixture
def playback(fake_sd):
    return sys.modules['waver.playback']
