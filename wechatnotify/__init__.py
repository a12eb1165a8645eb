"""Send notification messages to WeChat users."""

from .errors import (
    ConfigError,
    DecodeError,
    NetworkError,
    ProviderError,
    WeChatNotifyError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DecodeError",
    "NetworkError",
    "ProviderError",
    "WeChatNotifyError",
    "__version__",
]
