import xml.etree.ElementTree as ET
import app
from chart import generate
from devices import DeviceRegistry
from midi_io import MidiInputLoop
from presets import range_from_names
from conftest import FakePort, press


def _registry(names):
    return lambda: DeviceRegistry(lister=lambda: list(names))


def test_list_inputs(monkeypatch, capsys):
    monkeypatch.setattr(app, "DeviceRegistry", _registry(["Digital Piano"]))
    assert app.main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "MIDI connected" in out
    assert "Digital Piano" in out


def test_writes_xml_without_input(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(app, "DeviceRegistry", _registry([]))
    xml_path = tmp_path / "score.xml"
    midi_path = tmp_path / "score.mid"
    rc = app.main(["--notes", "8", "--seed", "3", "--xml", str(xml_path), "--midi", str(midi_path)])
    assert rc == 0
    body = xml_path.read_text(encoding="utf-8").split("\n", 2)[2]
    assert len(ET.fromstring(body).findall("./part/measure")) == 2
    assert midi_path.exists()
    assert "Tip: re-run with --input" in capsys.readouterr().out


def test_bad_range_is_reported(monkeypatch, capsys):
    monkeypatch.setattr(app, "DeviceRegistry", _registry([]))
    assert app.main(["--min", "G5", "--max", "C4"]) == 2
    assert "[ERROR]" in capsys.readouterr().out


def test_missing_input_device(monkeypatch, capsys):
    monkeypatch.setattr(app, "DeviceRegistry", _registry(["Digital Piano"]))
    assert app.main(["--input", "organ"]) == 1
    assert "no input matching 'organ'" in capsys.readouterr().out


def test_practice_run_to_completion(monkeypatch, port_opener, capsys):
    opener, ports = port_opener
    expected = generate(range_from_names("C4", "G5"), 4, 4, 7).expected
    ports["Digital Piano"] = FakePort(press(*expected))
    monkeypatch.setattr(app, "DeviceRegistry", _registry(["Digital Piano"]))
    monkeypatch.setattr(app, "MidiInputLoop", lambda name: MidiInputLoop(name, opener=opener))

    assert app.main(["--input", "piano", "--notes", "4", "--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert "----- Results -----" in out
    assert "complete: True" in out
    assert "accuracy: 100" in out
