import time
from typing import Callable, Optional
import mido
from config import POLL_INTERVAL_S


class MidiInputLoop:
    """
    Polls one mido input port and pushes each message's raw bytes to the
    subscribed callback. Works as the InputSource for a PracticeSession.
    """
    def __init__(self, input_name: str, opener: Callable = mido.open_input):
        self.input_name = input_name
        self.opener = opener
        self._callback: Optional[Callable] = None
        self._stop = False

    def subscribe(self, callback: Callable):
        self._callback = callback
        self._stop = False

    def unsubscribe(self):
        self._callback = None
        self._stop = True

    def run(self):
        with self.opener(self.input_name) as port:
            print(f"Listening to: {self.input_name}  (press Ctrl-C to stop)")
            while not self._stop:
                for msg in port.iter_pending():
                    if self._callback is None:
                        break
                    self._callback(msg.bytes())
                if self._stop:
                    break
                time.sleep(POLL_INTERVAL_S)
