from dataclasses import dataclass
from typing import Optional, Protocol, Callable, Literal, Union

Clef = Literal["treble", "bass"]
NoteDownVerdict = Literal["correct", "wrong", "complete"]
NoteOffVerdict = Literal["advanced", "complete", "idle"]
CursorFeedback = Literal["idle", "correct", "wrong"]


class SightReadingError(Exception):
    pass


class InvalidConfigError(SightReadingError, ValueError):
    """Bad generator settings. The caller should ask for new settings."""


class EmptyRangeError(InvalidConfigError):
    """No natural pitch lies inside the requested range."""


@dataclass(frozen=True)
class RangeSpec:
    min_pitch: int
    max_pitch: int
    clef: Clef = "treble"

    def __post_init__(self):
        for p in (self.min_pitch, self.max_pitch):
            if not 0 <= p <= 127:
                raise InvalidConfigError(f"pitch {p} is outside 0-127")
        if self.min_pitch > self.max_pitch:
            raise InvalidConfigError(
                f"min_pitch {self.min_pitch} is above max_pitch {self.max_pitch}")
        if self.clef not in ("treble", "bass"):
            raise InvalidConfigError(f"unknown clef {self.clef!r}")


@dataclass(frozen=True)
class ScoreNote:
    step: str
    octave: int
    duration: int   # subdivisions
    pitch: int


@dataclass(frozen=True)
class Measure:
    number: int
    notes: tuple[ScoreNote, ...]

    @property
    def total_duration(self) -> int:
        return sum(n.duration for n in self.notes)


@dataclass(frozen=True)
class Score:
    document: str               # MusicXML
    expected: list[int]
    measures: tuple[Measure, ...] = ()
    clef: Clef = "treble"


# Logical events emitted by the decoder
@dataclass(frozen=True)
class NoteDown:
    pitch: int
    velocity: int


@dataclass(frozen=True)
class NoteUp:
    pitch: int


@dataclass(frozen=True)
class AllReleased:
    pass


NoteEvent = Union[NoteDown, NoteUp, AllReleased]


@dataclass(frozen=True)
class InputDevice:
    id: str
    name: str


@dataclass
class Feedback:
    event: NoteEvent
    verdict: Optional[str] = None
    cursor: int = 0
    feedback: CursorFeedback = "idle"


class Notifier(Protocol):
    def send_verdict(self, verdict: str) -> None: ...
    def send_release(self) -> None: ...
    def close(self) -> None: ...


class InputSource(Protocol):
    """Anything that can push raw MIDI byte triples to a callback."""
    def subscribe(self, callback: Callable[[bytes], None]) -> None: ...
    def unsubscribe(self) -> None: ...
