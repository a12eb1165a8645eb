"""Standard input helpers."""

import logging
import sys
from typing import BinaryIO, Optional, TextIO

from ..errors import ConfigError

logger = logging.getLogger(__name__)

PASTE_HINT = "Paste your message and press CTRL-D to send. See --help for template format."


def is_terminal(stream) -> bool:
    """Return True if the stream is attached to a terminal."""
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def read_stdin(stdin: Optional[TextIO] = None, err: Optional[TextIO] = None) -> bytes:
    """
    Read all of standard input as bytes.

    Prints a paste hint first when stdin is interactive.

    Raises:
        ConfigError: if stdin cannot be read.
    """
    stdin = stdin if stdin is not None else sys.stdin
    err = err if err is not None else sys.stderr

    if is_terminal(stdin):
        print(PASTE_HINT, file=err)

    stream: BinaryIO = getattr(stdin, "buffer", stdin)
    try:
        data = stream.read()
    except (AttributeError, OSError, ValueError) as e:
        raise ConfigError(f"Cannot read standard input: {e}") from e

    if isinstance(data, str):
        data = data.encode("utf-8")

    logger.debug(f"Read {len(data)} bytes from stdin")
    return data
