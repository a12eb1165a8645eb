"""Error types for wechat-notify."""


class WeChatNotifyError(Exception):
    """Base class for all wechat-notify errors."""


class ConfigError(WeChatNotifyError):
    """Invalid invocation or configuration. Fatal before any send."""


class NetworkError(WeChatNotifyError):
    """Transport failure talking to the WeChat API."""


class DecodeError(WeChatNotifyError):
    """Response body was not the JSON shape we expected."""


class ProviderError(WeChatNotifyError):
    """WeChat answered with a nonzero errcode."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"{message or 'error'} (errcode {code})")
