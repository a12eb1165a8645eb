"""WeChat API access for wechat-notify."""

from .client import AccessToken, ProviderResponse, WeChatClient

__all__ = ["AccessToken", "ProviderResponse", "WeChatClient"]
