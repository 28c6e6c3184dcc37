# Named practice ranges. Add more here as needed.

from typing import Optional
from sr_types import RangeSpec, InvalidConfigError
from pitch_space import parse_note_name, to_pitch
from config import TREBLE_FLOOR

RANGE_PRESETS = {
    "Treble (C4-G5)":      RangeSpec(min_pitch=60, max_pitch=79, clef="treble"),
    "Treble Wide (A3-C6)": RangeSpec(min_pitch=57, max_pitch=84, clef="treble"),
    "Bass (E2-C4)":        RangeSpec(min_pitch=40, max_pitch=60, clef="bass"),
}


def get_preset(name: str) -> RangeSpec:
    """Exact name, or a case-insensitive prefix such as 'bass'."""
    if name in RANGE_PRESETS:
        return RANGE_PRESETS[name]
    s = name.lower()
    hits = [k for k in RANGE_PRESETS if k.lower().startswith(s)]
    if len(hits) == 1:
        return RANGE_PRESETS[hits[0]]
    raise InvalidConfigError(f"unknown range preset {name!r}; choose from {list(RANGE_PRESETS)}")


def range_from_names(min_note: str, max_note: str, clef: Optional[str] = None) -> RangeSpec:
    """
    RangeSpec from note names like 'C4', 'G5'. Without an explicit clef,
    ranges starting at middle C or higher use treble, lower ones bass.
    """
    lo = to_pitch(*parse_note_name(min_note))
    hi = to_pitch(*parse_note_name(max_note))
    if clef is None:
        clef = "treble" if lo >= TREBLE_FLOOR else "bass"
    return RangeSpec(min_pitch=lo, max_pitch=hi, clef=clef)
