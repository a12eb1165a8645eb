"""WeChat message payloads."""

import base64
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Union

from ..config import AUTO_URL_PREFIX, TEMPLATE_ID
from .record import InputRecord

logger = logging.getLogger(__name__)

DESC_MAX_LENGTH = 200  # wechat's restriction
DEFAULT_COLOR = "#000"
ELLIPSIS = "..."


@dataclass(frozen=True)
class ValueColor:
    """One template slot."""

    value: str = ""
    color: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"value": self.value, "color": self.color}


@dataclass(frozen=True)
class TemplateData:
    """The five slots of the notification template."""

    description: ValueColor = field(default_factory=ValueColor)
    datetime: ValueColor = field(default_factory=ValueColor)
    host: ValueColor = field(default_factory=ValueColor)
    type: ValueColor = field(default_factory=ValueColor)
    remark: ValueColor = field(default_factory=ValueColor)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        # Keys are the slot ids of the template
        return {
            "first": self.description.to_dict(),
            "time": self.datetime.to_dict(),
            "ip_list": self.host.to_dict(),
            "sec_type": self.type.to_dict(),
            "remark": self.remark.to_dict(),
        }


@dataclass(frozen=True)
class TextMessage:
    """Plain text message, sent through the custom message API."""

    touser: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "touser": self.touser,
            "msgtype": "text",
            "text": {"content": self.content},
        }


@dataclass(frozen=True)
class TemplateMessage:
    """Templated notification, sent through the template message API."""

    touser: str
    template_id: str
    url: str
    data: TemplateData

    def to_dict(self) -> Dict[str, Any]:
        return {
            "touser": self.touser,
            "template_id": self.template_id,
            "url": self.url,
            "data": self.data.to_dict(),
        }


Message = Union[TextMessage, TemplateMessage]


def auto_url(description: str, prefix: str = AUTO_URL_PREFIX) -> str:
    """Build a viewer link carrying the full description."""
    encoded = base64.standard_b64encode(description.encode("utf-8")).decode("ascii")
    return f"{prefix}#{encoded}"


def truncate_description(
    description: str,
    info_len: int,
    limit: int = DESC_MAX_LENGTH,
) -> str:
    """
    Shorten the description so it fits next to the other slots.

    Args:
        description: Full description text.
        info_len: Combined length of datetime, host and action.
        limit: Maximum combined length.

    Returns:
        The description unchanged if it fits, otherwise its first
        ``limit - info_len - 3`` characters followed by "...".
    """
    if len(description) + info_len <= limit:
        return description
    keep = max(limit - info_len - len(ELLIPSIS), 0)
    return description[:keep] + ELLIPSIS


def build_text_message(openid: str, body: Union[bytes, str]) -> TextMessage:
    """Wrap the unmodified stdin buffer in a text message."""
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return TextMessage(touser=openid, content=body)


def build_template_message(
    openid: str,
    record: InputRecord,
    template_id: str = TEMPLATE_ID,
    auto_url_enabled: bool = True,
    auto_url_prefix: str = AUTO_URL_PREFIX,
) -> TemplateMessage:
    """
    Build a template message from a parsed record.

    Args:
        openid: Recipient.
        record: Parsed standard input.
        template_id: Template to render.
        auto_url_enabled: Generate a viewer URL when the description had
            to be truncated and the record carries no URL.
        auto_url_prefix: Viewer page for generated URLs.

    Returns:
        A new TemplateMessage.
    """
    datetime = record.datetime
    info_len = len(datetime) + len(record.host) + len(record.action)

    url = record.url
    description = truncate_description(record.description, info_len)
    if description != record.description:
        logger.debug(
            f"Description truncated from {len(record.description)} "
            f"to {len(description)} characters"
        )
        if auto_url_enabled and not url:
            url = auto_url(record.description, auto_url_prefix)

    data = TemplateData(
        description=ValueColor(description, DEFAULT_COLOR),
        datetime=ValueColor(datetime, DEFAULT_COLOR),
        host=ValueColor(record.host, DEFAULT_COLOR),
        type=ValueColor(record.action, DEFAULT_COLOR),
    )
    return TemplateMessage(
        touser=openid,
        template_id=template_id,
        url=url,
        data=data,
    )


def endpoint_kind(message: Message) -> str:
    """Return the message API a payload is posted to."""
    if isinstance(message, TextMessage):
        return "custom"
    if isinstance(message, TemplateMessage):
        return "template"
    raise TypeError(f"Unsupported message type: {type(message).__name__}")
