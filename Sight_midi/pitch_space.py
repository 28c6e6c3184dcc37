import re
from sr_types import InvalidConfigError

STEP_TO_SEMITONE = {
    "C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11,
}
STEPS = tuple(STEP_TO_SEMITONE)

SHARP_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

_NOTE_NAME = re.compile(r"^([A-Ga-g])(-?\d+)$")


def to_pitch(step: str, octave: int) -> int:
    return (octave + 1) * 12 + STEP_TO_SEMITONE[step]


def natural_pitches_in_range(min_pitch: int, max_pitch: int) -> list[tuple[str, int]]:
    """Every natural (step, octave) in octaves 0-8 with min_pitch <= pitch <= max_pitch, ascending."""
    out = []
    for octave in range(0, 9):
        for step in STEPS:
            p = to_pitch(step, octave)
            if min_pitch <= p <= max_pitch:
                out.append((step, octave))
    return out


def parse_note_name(name: str) -> tuple[str, int]:
    """'C4' -> ('C', 4). Only natural names are accepted."""
    m = _NOTE_NAME.match(name.strip())
    if not m:
        raise InvalidConfigError(f"not a natural note name: {name!r}")
    return m.group(1).upper(), int(m.group(2))


def note_name(pitch: int) -> str:
    return f"{SHARP_NAMES[pitch % 12]}{pitch // 12 - 1}"
