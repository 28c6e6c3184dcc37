import pytest
import serial
from contextlib import contextmanager
from mido import Message

from sr_types import RangeSpec, Score


class FakeClock:
    def __init__(self, t: float = 100.0):
        self.t = t

    def __call__(self) -> float:
        return self.t

    def advance(self, dt: float):
        self.t += dt


class FakeSerial:
    def __init__(self, fail: bool = False):
        self.written = []
        self.closed = False
        self.fail = fail

    def write(self, payload: bytes):
        if self.fail:
            raise serial.SerialException("device unplugged")
        self.written.append(payload)

    def close(self):
        self.closed = True


class RecordingNotifier:
    def __init__(self):
        self.calls = []

    def send_verdict(self, verdict: str):
        self.calls.append(verdict)

    def send_release(self):
        self.calls.append("released")

    def close(self):
        self.calls.append("closed")


class FakePort:
    """Stands in for a mido input port: hands out queued messages once."""
    def __init__(self, messages):
        self.pending = list(messages)
        self.polls = 0

    def iter_pending(self):
        self.polls += 1
        batch, self.pending = self.pending, []
        return iter(batch)


def press(*pitches):
    """note_on then note_off for each pitch, in order."""
    msgs = []
    for p in pitches:
        msgs.append(Message('note_on', note=p, velocity=100))
        msgs.append(Message('note_off', note=p, velocity=0))
    return msgs


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_serial():
    return FakeSerial()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def treble():
    return RangeSpec(min_pitch=60, max_pitch=79, clef="treble")


@pytest.fixture
def bass():
    return RangeSpec(min_pitch=40, max_pitch=60, clef="bass")


@pytest.fixture
def three_note_score():
    return Score(document="", expected=[60, 62, 64])


@pytest.fixture
def port_opener():
    """
    Returns (opener, ports). opener(name) yields a FakePort built from the
    messages registered under that name.
    """
    ports = {}

    @contextmanager
    def opener(name):
        yield ports[name]

    return opener, ports
