import xml.etree.ElementTree as ET

from chart import generate
from musicxml import duration_type


def _root(document: str) -> ET.Element:
    lines = document.split("\n")
    assert lines[0].startswith("<?xml")
    assert lines[1].startswith("<!DOCTYPE score-partwise")
    return ET.fromstring("\n".join(lines[2:]))


def test_first_measure_carries_attributes_only(treble):
    score = generate(treble, 4, 12, seed=2)
    root = _root(score.document)
    assert root.tag == "score-partwise"
    assert root.get("version") == "3.1"
    assert root.find("./part-list/score-part").get("id") == "P1"

    measures = root.findall("./part/measure")
    assert len(measures) == 3
    attrs = measures[0].find("attributes")
    assert attrs.findtext("divisions") == "4"
    assert attrs.findtext("key/fifths") == "0"
    assert attrs.findtext("time/beats") == "4"
    assert attrs.findtext("time/beat-type") == "4"
    assert attrs.findtext("clef/sign") == "G"
    assert attrs.findtext("clef/line") == "2"
    assert all(m.find("attributes") is None for m in measures[1:])


def test_bass_clef(bass):
    root = _root(generate(bass, 4, 4, seed=2).document)
    attrs = root.find("./part/measure/attributes")
    assert attrs.findtext("clef/sign") == "F"
    assert attrs.findtext("clef/line") == "4"


def test_notes_match_expected_sequence(treble):
    score = generate(treble, 4, 8, seed=4)
    root = _root(score.document)
    notes = root.findall("./part/measure/note")
    assert len(notes) == 8
    steps = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
    pitches = [(int(n.findtext("pitch/octave")) + 1) * 12 + steps[n.findtext("pitch/step")] for n in notes]
    assert pitches == score.expected
    assert all(n.findtext("duration") == "4" for n in notes)
    assert all(n.findtext("type") == "quarter" for n in notes)


def test_duration_type_mapping():
    assert duration_type(2) == "eighth"
    assert duration_type(4) == "quarter"
    assert duration_type(8) == "half"
    assert duration_type(12) == "quarter"
