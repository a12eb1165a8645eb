"""Core message handling for wechat-notify."""

from .record import InputRecord, parse_input
from .message import (
    Message,
    TemplateData,
    TemplateMessage,
    TextMessage,
    ValueColor,
    auto_url,
    build_template_message,
    build_text_message,
    truncate_description,
)
from .notifier import Notifier, resolve_openid

__all__ = [
    "InputRecord",
    "parse_input",
    "Message",
    "TemplateData",
    "TemplateMessage",
    "TextMessage",
    "ValueColor",
    "auto_url",
    "build_template_message",
    "build_text_message",
    "truncate_description",
    "Notifier",
    "resolve_openid",
]
