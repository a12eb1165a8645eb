"""Per-recipient delivery loop."""

import logging
import sys
from typing import Iterable, Optional, TextIO, Union

from ..config import AUTO_URL_PREFIX, TEMPLATE_ID
from ..errors import WeChatNotifyError
from .message import Message, build_template_message, build_text_message
from .record import parse_input

logger = logging.getLogger(__name__)


def resolve_openid(arg: str) -> str:
    """Strip the informational ``@label`` suffix from a recipient argument."""
    return arg.split("@", 1)[0]


class Notifier:
    """
    Send one message to each recipient in turn.

    Recipients are independent: a failure is reported and counted, and
    the loop moves on to the next one.
    """

    def __init__(
        self,
        client,
        template_id: str = TEMPLATE_ID,
        raw: bool = False,
        auto_url: bool = True,
        auto_url_prefix: str = AUTO_URL_PREFIX,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        """
        Initialize the notifier.

        Args:
            client: Object with a ``send(message)`` method (WeChatClient).
            template_id: Template for templated messages.
            raw: Send stdin verbatim as a text message.
            auto_url: Generate a viewer URL for truncated messages.
            auto_url_prefix: Viewer page for generated URLs.
            out: Stream for success lines (stdout).
            err: Stream for failure lines (stderr).
        """
        self.client = client
        self.template_id = template_id
        self.raw = raw
        self.auto_url = auto_url
        self.auto_url_prefix = auto_url_prefix
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def build(self, openid: str, body: Union[bytes, str]) -> Message:
        """Build a fresh message for one recipient."""
        if self.raw:
            return build_text_message(openid, body)
        return build_template_message(
            openid,
            parse_input(body),
            template_id=self.template_id,
            auto_url_enabled=self.auto_url,
            auto_url_prefix=self.auto_url_prefix,
        )

    def notify_one(self, openid: str, body: Union[bytes, str]) -> bool:
        """Send to a single recipient and print the outcome line."""
        try:
            self.client.send(self.build(openid, body))
        except WeChatNotifyError as e:
            print(openid, e, file=self.err)
            return False
        print(openid, "ok", file=self.out)
        return True

    def notify(self, recipients: Iterable[str], body: Union[bytes, str]) -> int:
        """
        Send the message to every recipient in argument order.

        Args:
            recipients: ``OPENID[@label]`` arguments.
            body: The standard input buffer.

        Returns:
            Number of recipients that failed.
        """
        failures = 0
        for arg in recipients:
            if not self.notify_one(resolve_openid(arg), body):
                failures += 1
        logger.debug(f"Done: {failures} failed")
        return failures
