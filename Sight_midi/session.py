from typing import Callable, Optional, Sequence
from sr_types import (Score, NoteDown, NoteUp, AllReleased, Feedback,
                      CursorFeedback, Notifier, InputSource)
from decoder import NoteDecoder
from judge import Judge, IDLE
from practice_timer import PracticeTimer


class PracticeSession:
    """
    Single dispatcher for one practice run. Every raw message goes through
    handle_message, so the decoder and judge are only ever touched from
    one place, one message at a time.
    """
    def __init__(self, notifier: Optional[Notifier] = None, timer: Optional[PracticeTimer] = None,
                 on_feedback: Optional[Callable[[list[Feedback]], None]] = None):
        self.decoder = NoteDecoder()
        self.judge = Judge()
        self.timer = timer or PracticeTimer()
        self.notifier = notifier
        self.on_feedback = on_feedback
        self.feedback: CursorFeedback = "idle"
        self.source: Optional[InputSource] = None

    def reset(self, score: Score):
        self.judge.reset(score.expected)
        self.timer.reset()
        self.feedback = "idle"

    def attach(self, source: InputSource):
        if self.source is not None:
            self.detach()
        self.source = source
        source.subscribe(self.handle_message)

    def detach(self):
        if self.source is not None:
            self.source.unsubscribe()
            self.source = None
        self.decoder.teardown()
        self.feedback = "idle"

    def handle_message(self, data: Sequence[int]) -> list[Feedback]:
        out = []
        for event in self.decoder.feed(data):
            verdict = None
            if isinstance(event, NoteDown) and self.judge.state == IDLE:
                # no score loaded yet: keys are tracked but not judged
                pass
            elif isinstance(event, NoteDown):
                if not self.judge.complete:
                    self.timer.start()
                verdict = self.judge.handle_note_down(event.pitch)
                if verdict == "correct":
                    self.feedback = "correct"
                elif verdict == "wrong":
                    self.feedback = "wrong"
            elif isinstance(event, NoteUp):
                verdict = self.judge.handle_note_off(event.pitch)
                if verdict in ("advanced", "complete"):
                    self.feedback = "idle"
                if verdict == "complete":
                    self.timer.stop()
            elif isinstance(event, AllReleased):
                self.feedback = "idle"

            if self.notifier:
                if isinstance(event, AllReleased):
                    self.notifier.send_release()
                elif verdict not in (None, "idle"):
                    self.notifier.send_verdict(verdict)

            out.append(Feedback(event=event, verdict=verdict,
                                cursor=self.judge.cursor, feedback=self.feedback))
        if out and self.on_feedback:
            self.on_feedback(out)
        return out

    def summary(self) -> dict:
        stats = self.judge.finalize()
        stats["elapsed_s"] = self.timer.elapsed()
        return stats
