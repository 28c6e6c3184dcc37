from decoder import NoteDecoder
from sr_types import NoteDown, NoteUp, AllReleased


def test_note_on_emits_note_down():
    d = NoteDecoder()
    assert d.feed([0x90, 60, 100]) == [NoteDown(60, 100)]
    assert d.held == {60}


def test_channel_nibble_is_ignored():
    d = NoteDecoder()
    assert d.feed([0x93, 60, 90]) == [NoteDown(60, 90)]
    assert d.feed([0x83, 60, 0]) == [NoteUp(60), AllReleased()]


def test_repeated_note_on_while_held_is_dropped():
    d = NoteDecoder()
    d.feed([0x90, 60, 100])
    assert d.feed([0x90, 60, 100]) == []
    assert d.held == {60}


def test_velocity_zero_note_on_is_a_release():
    d = NoteDecoder()
    d.feed([0x90, 64, 70])
    assert d.feed([0x90, 64, 0]) == [NoteUp(64), AllReleased()]
    assert d.held == set()


def test_stray_release_is_ignored():
    d = NoteDecoder()
    assert d.feed([0x80, 60, 0]) == []
    assert d.feed([0x90, 60, 0]) == []


def test_all_released_only_when_last_key_goes_up():
    d = NoteDecoder()
    d.feed([0x90, 60, 100])
    d.feed([0x90, 64, 100])
    assert d.feed([0x80, 60, 0]) == [NoteUp(60)]
    assert d.feed([0x80, 64, 0]) == [NoteUp(64), AllReleased()]
    # already empty: nothing more
    assert d.feed([0x80, 64, 0]) == []


def test_all_released_fires_once_per_transition():
    d = NoteDecoder()
    seen = []
    for msg in ([0x90, 60, 1], [0x80, 60, 0], [0x80, 60, 0], [0x90, 62, 1], [0x90, 62, 0]):
        seen.extend(d.feed(msg))
    assert seen.count(AllReleased()) == 2
    for i in range(1, len(seen)):
        assert not (seen[i] == AllReleased() and seen[i - 1] == AllReleased())


def test_short_and_unknown_messages_ignored():
    d = NoteDecoder()
    assert d.feed([0x90, 60]) == []
    assert d.feed([]) == []
    assert d.feed(None) == []
    assert d.feed([0xB0, 64, 127]) == []   # sustain pedal
    assert d.feed([0xE0, 0, 64]) == []     # pitch bend
    assert d.held == set()


def test_teardown_clears_without_events():
    d = NoteDecoder()
    d.feed([0x90, 60, 100])
    d.feed([0x90, 67, 100])
    d.teardown()
    assert d.held == set()
    # old releases after teardown are strays now
    assert d.feed([0x80, 60, 0]) == []
