"""User devices attached to the network and their text form."""

import re
from dataclasses import dataclass

_ID_LIMIT = 31
_SERIAL_ID_LIMIT = 30

_LINE = re.compile(r"([^,\0]{0,31}),([0-9]*),([0-9]*),([0-9]*)")

_SERVICE_LABELS = {1: "Voice", 2: "SMS", 3: "Data"}


def format_user_id(number):
    """Return the identifier for the user with sequence ``number``."""
    return f"U{number}"


def service_label(service_type):
    """Return the display name of a service type."""
    return _SERVICE_LABELS.get(service_type, "Voice+Data")


@dataclass
class UserDevice:
    """A handset: its id, frequency, message load and service type."""

    user_id: str = ""
    frequency_mhz: int = 0
    messages: int = 0
    service_type: int = 0

    def __post_init__(self):
        self.user_id = self.user_id[:_ID_LIMIT]

    def serialize(self):
        """Return the device as a comma-separated line ending in a newline."""
        return (
            f"{self.user_id[:_SERIAL_ID_LIMIT]},{self.frequency_mhz},"
            f"{self.messages},{self.service_type}\n"
        )

    @classmethod
    def deserialize(cls, line):
        """Build a device from a serialized line; raise ValueError if malformed."""
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"malformed user device line: {line!r}")
        user_id, freq, messages, service = match.groups()
        return cls(
            user_id=user_id,
            frequency_mhz=int(freq or 0),
            messages=int(messages or 0),
            service_type=int(service or 0),
        )