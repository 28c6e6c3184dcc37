from typing import Sequence
from sr_types import NoteDown, NoteUp, AllReleased, NoteEvent
from config import COMMAND_MASK, NOTE_ON, NOTE_OFF


class NoteDecoder:
    """
    Turns raw (status, note, velocity) messages into NoteDown / NoteUp /
    AllReleased events.

    Keyboards retrigger and drop releases, so the decoder keeps the set of
    held notes: a note-on for a held note is dropped, a release for a note
    that isn't held is dropped, and AllReleased fires once when the last held
    note goes up. Note-on with velocity 0 counts as a release.
    """
    def __init__(self):
        self.held: set[int] = set()

    def feed(self, data: Sequence[int]) -> list[NoteEvent]:
        if data is None or len(data) < 3:
            return []
        status, note, velocity = data[0], data[1], data[2]
        command = status & COMMAND_MASK

        if command == NOTE_OFF or (command == NOTE_ON and velocity == 0):
            if note not in self.held:
                return []
            self.held.discard(note)
            events: list[NoteEvent] = [NoteUp(note)]
            if not self.held:
                events.append(AllReleased())
            return events

        if command == NOTE_ON:
            if note in self.held:
                return []
            self.held.add(note)
            return [NoteDown(note, velocity)]

        return []

    def teardown(self):
        # no release events: the caller treats detach as all-released itself
        self.held.clear()
