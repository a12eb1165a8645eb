"""Configuration management for wechat-notify."""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# Load environment variables from .env file
load_dotenv()

WECHAT_HOST = "https://api.weixin.qq.com/cgi-bin"
TEMPLATE_ID = "u7WqGbcn5PBiFVFT6iba8ULsaRwYG2NKmulZ1NYvuEc"
AUTO_URL_PREFIX = "https://dn-gaiamagic.qbox.me/auto-url.html"

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "wechat-notify" / "config.toml"

# Environment variable -> WeChatConfig field
ENV_OVERRIDES = {
    "WECHAT_APPID": "app_id",
    "WECHAT_SECRET": "secret",
    "WECHAT_TEMPLATE_ID": "template_id",
}


@dataclass
class WeChatConfig:
    """WeChat Official Account configuration."""

    app_id: str = ""
    secret: str = ""
    template_id: str = TEMPLATE_ID
    api_host: str = WECHAT_HOST
    auto_url_prefix: str = AUTO_URL_PREFIX
    timeout: Optional[float] = None  # None = transport default


@dataclass
class Config:
    """Main configuration."""

    wechat: WeChatConfig = field(default_factory=WeChatConfig)
    log_file: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create Config from dictionary."""
        return cls(
            wechat=WeChatConfig(**data.get("wechat", {})),
            log_file=Path(data["log_file"]) if data.get("log_file") else None,
        )

    def apply_env(self, environ=None) -> "Config":
        """Override credentials from environment variables."""
        environ = os.environ if environ is None else environ
        for var, attr in ENV_OVERRIDES.items():
            value = environ.get(var)
            if value:
                setattr(self.wechat, attr, value)
        return self

    def validate(self) -> None:
        """Raise ConfigError if credentials are missing."""
        missing = [
            name
            for name, value in (("app_id", self.wechat.app_id), ("secret", self.wechat.secret))
            if not value
        ]
        if missing:
            raise ConfigError(
                f"Missing WeChat credentials: {', '.join(missing)}. "
                "Set WECHAT_APPID and WECHAT_SECRET or add them to the [wechat] section."
            )


def load_config(path: Path) -> Config:
    """
    Load configuration from TOML file and environment.

    Args:
        path: Path to config file.

    Returns:
        Config object (defaults if file doesn't exist), with
        WECHAT_* environment variables applied on top.
    """
    if not path.exists():
        return Config().apply_env()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        config = Config.from_dict(data)
    except TypeError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    return config.apply_env()


def get_default_config_toml() -> str:
    """Return default configuration as TOML string."""
    return f'''# wechat-notify Configuration

# Uncomment to enable file logging
# log_file = "~/.local/share/wechat-notify/wechat-notify.log"

[wechat]
# Credentials of the Official Account (WECHAT_APPID / WECHAT_SECRET
# environment variables take precedence)
# app_id = "wx0000000000000000"
# secret = "xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx"

template_id = "{TEMPLATE_ID}"
api_host = "{WECHAT_HOST}"

# Viewer page used when a long message has no URL
auto_url_prefix = "{AUTO_URL_PREFIX}"

# HTTP timeout in seconds (omit for no timeout)
# timeout = 10
'''
