import xml.etree.ElementTree as ET
from sr_types import Measure, Clef
from config import (DIVISIONS, KEY_FIFTHS, BEATS, BEAT_TYPE, CLEFS,
                    DURATION_TYPES, DEFAULT_DURATION_TYPE)

XML_DECL = '<?xml version="1.0" encoding="UTF-8"?>'
DOCTYPE = ('<!DOCTYPE score-partwise PUBLIC "-//Recordare//DTD MusicXML 3.1 Partwise//EN" '
           '"http://www.musicxml.org/dtds/partwise.dtd">')
PART_ID = "P1"
PART_NAME = "Music"


def duration_type(duration: int) -> str:
    return DURATION_TYPES.get(duration, DEFAULT_DURATION_TYPE)


def _text(parent: ET.Element, tag: str, value) -> ET.Element:
    el = ET.SubElement(parent, tag)
    el.text = str(value)
    return el


def _attributes(parent: ET.Element, clef: Clef):
    attrs = ET.SubElement(parent, "attributes")
    _text(attrs, "divisions", DIVISIONS)
    key = ET.SubElement(attrs, "key")
    _text(key, "fifths", KEY_FIFTHS)
    time = ET.SubElement(attrs, "time")
    _text(time, "beats", BEATS)
    _text(time, "beat-type", BEAT_TYPE)
    sign, line = CLEFS[clef]
    clef_el = ET.SubElement(attrs, "clef")
    _text(clef_el, "sign", sign)
    _text(clef_el, "line", line)


def build_document(measures: list[Measure], clef: Clef) -> str:
    root = ET.Element("score-partwise", version="3.1")
    part_list = ET.SubElement(root, "part-list")
    score_part = ET.SubElement(part_list, "score-part", id=PART_ID)
    _text(score_part, "part-name", PART_NAME)
    part = ET.SubElement(root, "part", id=PART_ID)

    for i, m in enumerate(measures):
        measure_el = ET.SubElement(part, "measure", number=str(m.number))
        if i == 0:
            _attributes(measure_el, clef)
        for n in m.notes:
            note_el = ET.SubElement(measure_el, "note")
            pitch_el = ET.SubElement(note_el, "pitch")
            _text(pitch_el, "step", n.step)
            _text(pitch_el, "octave", n.octave)
            _text(note_el, "duration", n.duration)
            _text(note_el, "type", duration_type(n.duration))

    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return "\n".join([XML_DECL, DOCTYPE, body]) + "\n"
