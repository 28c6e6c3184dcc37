import time
import serial, serial.tools.list_ports
from typing import Optional
from sr_types import Notifier as NotifierProtocol

VERDICT_BYTES = {
    "correct": b'G',
    "wrong": b'R',
    "advanced": b'Y',
    "complete": b'Y',
}
RELEASE_BYTE = b'I'


def find_serial(name_like: Optional[str]) -> Optional[str]:
    if not name_like:
        return None
    s = name_like.lower()
    for p in serial.tools.list_ports.comports():
        combo = (p.device + " " + (p.description or "")).lower()
        if s in combo:
            return p.device
    if name_like.startswith("/dev/") or name_like.upper().startswith("COM"):
        return name_like
    return None


class ArduinoNotifier(NotifierProtocol):
    """
    One byte per verdict:
      'G' -> correct  (GREEN)
      'R' -> wrong    (RED)
      'Y' -> advanced / complete (YELLOW)
      'I' -> all keys released (LEDs off)
    """
    def __init__(self, port: Optional[str], baud: int = 115200, ser=None):
        self.ser = ser
        if port and ser is None:
            try:
                self.ser = serial.Serial(port, baudrate=baud, timeout=0)
                time.sleep(2.0)
                print(f"Arduino connected on {port} @ {baud} baud")
            except serial.SerialException as e:
                print(f"[WARN] Could not open Arduino serial '{port}': {e}")

    def _write(self, payload: bytes):
        if not self.ser:
            return
        try:
            self.ser.write(payload)
        except serial.SerialException as e:
            print(f"[WARN] Serial write failed: {e}")

    def send_verdict(self, verdict: str):
        payload = VERDICT_BYTES.get(verdict)
        if payload:
            self._write(payload)

    def send_release(self):
        self._write(RELEASE_BYTE)

    def close(self):
        if self.ser:
            try:
                self.ser.close()
            except serial.SerialException as e:
                print(f"[WARN] Serial close failed: {e}")
            self.ser = None
