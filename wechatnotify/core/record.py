"""Plain-text header/description parser."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Union

logger = logging.getLogger(__name__)

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Header keys that populate an InputRecord field
RECOGNIZED_KEYS = ("timestamp", "service", "event", "action", "host", "url")

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class InputRecord:
    """Structured message read from standard input."""

    timestamp: int = 0  # seconds since epoch, 0 = absent
    service: str = ""
    event: str = ""
    action: str = ""
    host: str = ""
    description: str = ""
    url: str = ""

    @property
    def datetime(self) -> str:
        """Timestamp as local 'YYYY-MM-DD HH:MM:SS', or '' if absent."""
        if self.timestamp <= 0:
            return ""
        try:
            return datetime.fromtimestamp(self.timestamp).strftime(DATETIME_FORMAT)
        except (OverflowError, OSError, ValueError):
            logger.debug(f"Timestamp out of range: {self.timestamp}")
            return ""


def parse_timestamp(value: str) -> int:
    """Parse a base-10 int64, returning 0 on any failure."""
    if not _INT_RE.match(value):
        return 0
    number = int(value)
    if number < _INT64_MIN or number > _INT64_MAX:
        return 0
    return number


def parse_input(data: Union[bytes, str]) -> InputRecord:
    """
    Parse a message into an InputRecord.

    The message is a block of ``key: value`` header lines, an empty
    line, then free text::

        timestamp: 1452504535
        service:   some-service
        host:      some-host

        multi-line description...

    Before the first empty line, a line with a recognized key sets that
    field and also discards any description text collected so far.
    Other lines (no colon, or an unknown key) are kept as description.
    Everything after the first empty line is description.

    Args:
        data: Raw standard input.

    Returns:
        The parsed record. Never raises on malformed input.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")

    fields = {}
    description = ""
    in_description = False

    for line in data.strip().split("\n"):
        if line.endswith("\r"):
            line = line[:-1]

        if not in_description and not line:
            in_description = True
            continue

        if in_description:
            description += line + "\n"
            continue

        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or key not in RECOGNIZED_KEYS:
            description += line + "\n"
            continue

        value = value.strip()
        if key == "timestamp":
            fields[key] = parse_timestamp(value)
        else:
            fields[key] = value

        # Known quirk: a header line wipes free text collected above it
        description = ""

    return InputRecord(description=description.strip(), **fields)
