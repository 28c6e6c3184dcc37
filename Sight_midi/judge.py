from typing import Optional
from sr_types import NoteDownVerdict, NoteOffVerdict

IDLE = "idle"
AWAITING = "awaiting"
ARMED = "armed"
COMPLETE = "complete"


def accuracy(attempts: int, correct_attempts: int) -> int:
    if attempts == 0:
        return 100
    # round half up, in integers
    return (200 * correct_attempts + attempts) // (2 * attempts)


class Judge:
    """
    Checks key presses against the expected pitches, one note at a time.

    A correct press arms that note; the cursor only moves when the armed
    note is released. Wrong presses count as attempts but never move the
    cursor or disarm the armed note.
    """
    def __init__(self):
        self.expected: Optional[list[int]] = None
        self.cursor = 0
        self.armed: Optional[int] = None
        self.attempts = 0
        self.correct_attempts = 0

    @property
    def state(self) -> str:
        if self.expected is None:
            return IDLE
        if self.cursor >= len(self.expected):
            return COMPLETE
        if self.armed is not None:
            return ARMED
        return AWAITING

    @property
    def complete(self) -> bool:
        return self.state == COMPLETE

    @property
    def accuracy(self) -> int:
        return accuracy(self.attempts, self.correct_attempts)

    def reset(self, expected: list[int]):
        self.expected = list(expected)
        self.cursor = 0
        self.armed = None
        self.attempts = 0
        self.correct_attempts = 0

    def handle_note_down(self, pitch: int) -> NoteDownVerdict:
        state = self.state
        if state == IDLE:
            return "wrong"
        if state == COMPLETE:
            return "complete"

        if state == ARMED:
            if pitch == self.armed:
                return "correct"
            self.attempts += 1
            return "wrong"

        self.attempts += 1
        if pitch == self.expected[self.cursor]:
            self.armed = pitch
            self.correct_attempts += 1
            return "correct"
        return "wrong"

    def handle_note_off(self, pitch: int) -> NoteOffVerdict:
        if self.state != ARMED or pitch != self.armed:
            return "idle"
        self.armed = None
        self.cursor += 1
        return "complete" if self.cursor >= len(self.expected) else "advanced"

    def finalize(self) -> dict:
        total = len(self.expected) if self.expected is not None else 0
        return {
            "notes_in_score": total,
            "cursor": self.cursor,
            "attempts": self.attempts,
            "correct_attempts": self.correct_attempts,
            "accuracy": self.accuracy,
            "complete": self.complete,
        }
