# Notation grid (4/4 at 4 subdivisions per beat)
DIVISIONS = 4
BEATS = 4
BEAT_TYPE = 4
MEASURE_SUBDIVISIONS = BEATS * DIVISIONS  # 16
KEY_FIFTHS = 0

# Durations the rhythm generator may pick from (subdivisions)
ALLOWED_DURATIONS = (4,)

DURATION_TYPES = {
    2: "eighth",
    4: "quarter",
    8: "half",
}
DEFAULT_DURATION_TYPE = "quarter"

# clef -> (sign, line)
CLEFS = {
    "treble": ("G", 2),
    "bass":   ("F", 4),
}

# Raw MIDI status bytes
COMMAND_MASK = 0xF0
NOTE_ON = 0x90
NOTE_OFF = 0x80

# Session defaults
MIN_TOTAL_NOTES = 4
MAX_TOTAL_NOTES = 200
DEFAULT_TOTAL_NOTES = 100
DEFAULT_NOTES_PER_MEASURE = 4
DEFAULT_SEED = 1
DEFAULT_MIN_NOTE = "C4"
DEFAULT_MAX_NOTE = "G5"

# Treble clef is chosen for ranges starting at or above middle C
TREBLE_FLOOR = 60

# MIDI export
DEFAULT_TEMPO_USPQN = 500_000  # 120 BPM
EXPORT_TICKS_PER_BEAT = 480
EXPORT_VELOCITY = 80

# Input polling
POLL_INTERVAL_S = 0.001


def clamp_note_count(n: int) -> int:
    return max(MIN_TOTAL_NOTES, min(MAX_TOTAL_NOTES, n))
