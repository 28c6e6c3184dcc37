from mido import MidiFile, MidiTrack, MetaMessage, Message
from sr_types import Score
from config import (DEFAULT_TEMPO_USPQN, EXPORT_TICKS_PER_BEAT, EXPORT_VELOCITY,
                    DIVISIONS, BEATS, BEAT_TYPE)


def score_to_midi(score: Score, tempo: int = DEFAULT_TEMPO_USPQN) -> MidiFile:
    """One track, one note per expected pitch, lengths taken from the rhythm."""
    mid = MidiFile(ticks_per_beat=EXPORT_TICKS_PER_BEAT)
    track = MidiTrack()
    mid.tracks.append(track)
    track.append(MetaMessage('set_tempo', tempo=tempo, time=0))
    track.append(MetaMessage('time_signature', numerator=BEATS, denominator=BEAT_TYPE, time=0))

    ticks_per_division = EXPORT_TICKS_PER_BEAT // DIVISIONS
    for measure in score.measures:
        for n in measure.notes:
            track.append(Message('note_on', note=n.pitch, velocity=EXPORT_VELOCITY, time=0))
            track.append(Message('note_off', note=n.pitch, velocity=0,
                                 time=n.duration * ticks_per_division))
    return mid


def save_midi(score: Score, path: str, tempo: int = DEFAULT_TEMPO_USPQN):
    score_to_midi(score, tempo).save(path)
