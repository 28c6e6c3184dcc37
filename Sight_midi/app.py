#!/usr/bin/env python3
import argparse, sys
from pathlib import Path
from config import (DEFAULT_TOTAL_NOTES, DEFAULT_NOTES_PER_MEASURE, DEFAULT_SEED,
                    DEFAULT_MIN_NOTE, DEFAULT_MAX_NOTE, clamp_note_count)
from sr_types import InvalidConfigError, NoteDown, NoteUp
from chart import generate
from presets import RANGE_PRESETS, get_preset, range_from_names
from session import PracticeSession
from devices import DeviceRegistry, CONNECTED, status_label
from midi_io import MidiInputLoop
from notifier import ArduinoNotifier, find_serial
from exporter import save_midi
from pitch_space import note_name
from practice_timer import format_elapsed


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Sight-reading practice: generate a score, listen to your keyboard, check each note.")
    ap.add_argument("--preset", help=f"Named note range or its prefix, one of {list(RANGE_PRESETS)} (overrides --min/--max)")
    ap.add_argument("--min", default=DEFAULT_MIN_NOTE, help=f"Lowest note, e.g. C4 (default {DEFAULT_MIN_NOTE})")
    ap.add_argument("--max", default=DEFAULT_MAX_NOTE, help=f"Highest note, e.g. G5 (default {DEFAULT_MAX_NOTE})")
    ap.add_argument("--clef", choices=["treble", "bass"], help="Clef (default: from the range)")
    ap.add_argument("--notes", type=int, default=DEFAULT_TOTAL_NOTES, help=f"Total notes (default {DEFAULT_TOTAL_NOTES})")
    ap.add_argument("--per-measure", type=int, default=DEFAULT_NOTES_PER_MEASURE, help=f"Notes per measure (default {DEFAULT_NOTES_PER_MEASURE})")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED, help=f"Score seed (default {DEFAULT_SEED})")
    ap.add_argument("--xml", help="Write the generated MusicXML here")
    ap.add_argument("--midi", help="Write the generated exercise as a MIDI file here")
    ap.add_argument("--input", help="MIDI input name or substring. If omitted, prints inputs and exits.")
    ap.add_argument("--list", action="store_true", help="List MIDI inputs and exit")
    ap.add_argument("--serial", help="Arduino serial (full path or substring, e.g. 'usbmodem', 'COM5')")
    ap.add_argument("--baud", type=int, default=115200, help="Arduino baud (default 115200)")
    return ap


def print_feedback(session: PracticeSession, items):
    total = len(session.judge.expected or [])
    for fb in items:
        ev = fb.event
        if isinstance(ev, NoteDown) or (isinstance(ev, NoteUp) and fb.verdict != "idle"):
            print(f"[{note_name(ev.pitch):>4s}] {fb.verdict:8s}  cursor={fb.cursor}/{total}")


def print_results(stats: dict):
    print("\n----- Results -----")
    for k, v in stats.items():
        if k == "elapsed_s": print(f"{k:>18s}: {format_elapsed(v)}")
        else:                print(f"{k:>18s}: {v}")


def main(argv=None):
    args = build_parser().parse_args(argv)

    registry = DeviceRegistry()
    if args.list or not args.input:
        registry.refresh()
        print(f"{status_label(registry.status)}")
        print("Available MIDI inputs:")
        for d in registry.devices: print("  -", d.name)
        if not args.list:
            print("\nTip: re-run with --input 'Your Keyboard Port'")
        if args.list:
            return 0

    try:
        range_spec = get_preset(args.preset) if args.preset else range_from_names(args.min, args.max, args.clef)
        score = generate(range_spec, args.per_measure, clamp_note_count(args.notes), args.seed)
    except InvalidConfigError as e:
        print(f"[ERROR] {e}")
        return 2

    print(f"Generated {len(score.expected)} notes in {len(score.measures)} measures (seed {args.seed})")
    if args.xml:
        Path(args.xml).write_text(score.document, encoding="utf-8")
        print(f"MusicXML written to {args.xml}")
    if args.midi:
        save_midi(score, args.midi)
        print(f"MIDI written to {args.midi}")

    if not args.input:
        return 0

    registry.refresh()
    device_id = registry.find(args.input)
    if registry.status != CONNECTED or not device_id:
        print(f"[WARN] {status_label(registry.status)}: no input matching '{args.input}'")
        return 1
    registry.select(device_id)

    notifier = None
    if args.serial:
        port = find_serial(args.serial)
        if not port:
            print("[WARN] Serial port not found. Proceeding without Arduino.")
        else:
            notifier = ArduinoNotifier(port, args.baud)

    loop = MidiInputLoop(registry.selected)

    def on_feedback(items):
        print_feedback(session, items)
        if session.judge.complete:
            loop.unsubscribe()

    session = PracticeSession(notifier=notifier, on_feedback=on_feedback)
    session.reset(score)
    print("First notes:", " ".join(note_name(p) for p in score.expected[:8]))

    session.attach(loop)

    try:
        loop.run()
    except KeyboardInterrupt:
        pass
    finally:
        session.detach()
        if notifier: notifier.close()
        print_results(session.summary())

    return 0

if __name__ == "__main__":
    sys.exit(main())
