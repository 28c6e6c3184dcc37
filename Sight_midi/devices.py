from typing import Callable
import mido
from sr_types import InputDevice, InvalidConfigError

CHECKING = "checking"
CONNECTED = "connected"
NO_DEVICE = "no_device"
UNSUPPORTED = "unsupported"
PERMISSION_DENIED = "permission_denied"

STATUS_LABELS = {
    CHECKING: "Checking MIDI",
    CONNECTED: "MIDI connected",
    NO_DEVICE: "MIDI disconnected",
    UNSUPPORTED: "MIDI unsupported",
    PERMISSION_DENIED: "MIDI permission denied",
}

UNNAMED = "Unnamed MIDI Input"


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, STATUS_LABELS[NO_DEVICE])


class DeviceRegistry:
    """
    Lists MIDI inputs and remembers which one is selected. Call refresh()
    after a hot-plug; the selection survives if its device is still there,
    otherwise the first device is picked.
    """
    def __init__(self, lister: Callable[[], list] = mido.get_input_names):
        self.lister = lister
        self.devices: list[InputDevice] = []
        self.selected = ""
        self.status = CHECKING

    def refresh(self) -> list[InputDevice]:
        try:
            names = list(self.lister())
        except ImportError as e:
            # no mido backend installed
            print(f"[WARN] MIDI backend unavailable: {e}")
            self._set_devices([], UNSUPPORTED)
            return self.devices
        except OSError as e:
            print(f"[WARN] Could not access MIDI inputs: {e}")
            self._set_devices([], PERMISSION_DENIED)
            return self.devices

        devices = [InputDevice(id=n, name=n or UNNAMED) for n in dict.fromkeys(names)]
        self._set_devices(devices, CONNECTED if devices else NO_DEVICE)
        return self.devices

    def _set_devices(self, devices: list[InputDevice], status: str):
        self.devices = devices
        self.status = status
        ids = [d.id for d in devices]
        if not ids:
            self.selected = ""
        elif self.selected not in ids:
            self.selected = ids[0]

    def select(self, device_id: str):
        if device_id not in (d.id for d in self.devices):
            raise InvalidConfigError(f"unknown MIDI input {device_id!r}")
        self.selected = device_id

    def find(self, name_like: str) -> str:
        """Exact id first, then case-insensitive substring; '' if nothing matches."""
        for d in self.devices:
            if d.id == name_like:
                return d.id
        s = name_like.lower()
        for d in self.devices:
            if s in d.name.lower():
                return d.id
        return ""

    def snapshot(self) -> dict:
        return {
            "devices": [{"id": d.id, "name": d.name} for d in self.devices],
            "selected": self.selected,
        }
