from typing import Sequence
from sr_types import (RangeSpec, Score, Measure, ScoreNote,
                      InvalidConfigError, EmptyRangeError)
from config import ALLOWED_DURATIONS, MEASURE_SUBDIVISIONS
from pitch_space import natural_pitches_in_range, to_pitch
from musicxml import build_document
from rng import Mulberry32


def generate_rhythm(allowed: Sequence[int], notes_count: int, rng: Mulberry32,
                    total: int = MEASURE_SUBDIVISIONS) -> list[int]:
    """
    Split one measure into notes_count durations summing to total.
    Each slot only offers durations that still leave the minimum for every
    slot after it; leftover budget goes to the last note.
    """
    durations: list[int] = []
    remaining = total
    min_d = min(allowed)

    for i in range(notes_count):
        slots_left = notes_count - i - 1
        max_for_slot = remaining - min_d * slots_left
        options = [d for d in allowed if d <= max_for_slot and d <= remaining]
        d = rng.choice(options) if options else min_d
        durations.append(d)
        remaining -= d

    if remaining > 0 and durations:
        durations[-1] += remaining
    return durations


def generate(range_spec: RangeSpec, notes_per_measure: int, total_notes: int, seed: int,
             allowed_durations: Sequence[int] = ALLOWED_DURATIONS) -> Score:
    """
    Build a random, reproducible exercise.

    Draw order per measure: every rhythm duration first, then one pitch per
    duration, all from one Mulberry32 stream seeded with `seed`.

    Raises InvalidConfigError when notes_per_measure is not positive, or when
    notes_per_measure notes of the shortest allowed duration would overfill
    a 16-subdivision measure; EmptyRangeError when the range holds no
    natural pitch.
    """
    if notes_per_measure <= 0:
        raise InvalidConfigError(f"notes_per_measure must be positive, got {notes_per_measure}")
    if not allowed_durations or min(allowed_durations) <= 0:
        raise InvalidConfigError(f"allowed durations must be positive, got {allowed_durations!r}")
    # more notes than the shortest duration can fit would overfill the bar
    if notes_per_measure * min(allowed_durations) > MEASURE_SUBDIVISIONS:
        raise InvalidConfigError(
            f"{notes_per_measure} notes per measure do not fit in {MEASURE_SUBDIVISIONS} "
            f"subdivisions with a shortest duration of {min(allowed_durations)}")

    if total_notes <= 0:
        return Score(document=build_document([], range_spec.clef), expected=[],
                     measures=(), clef=range_spec.clef)

    pool = natural_pitches_in_range(range_spec.min_pitch, range_spec.max_pitch)
    if not pool:
        raise EmptyRangeError(
            f"no natural pitch between {range_spec.min_pitch} and {range_spec.max_pitch}")

    rng = Mulberry32(seed)
    measures: list[Measure] = []
    expected: list[int] = []
    remaining_notes = total_notes
    number = 1

    while remaining_notes > 0:
        count = min(notes_per_measure, remaining_notes)
        durations = generate_rhythm(allowed_durations, count, rng)
        notes = []
        for d in durations:
            step, octave = rng.choice(pool)
            notes.append(ScoreNote(step=step, octave=octave, duration=d,
                                   pitch=to_pitch(step, octave)))
        measures.append(Measure(number=number, notes=tuple(notes)))
        expected.extend(n.pitch for n in notes)
        remaining_notes -= count
        number += 1

    return Score(document=build_document(measures, range_spec.clef),
                 expected=expected, measures=tuple(measures), clef=range_spec.clef)
