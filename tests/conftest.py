"""Shared fixtures."""

import pytest

from wechatnotify.config import WeChatConfig

from .fakes import FakeSession, send_ok, token_ok


@pytest.fixture
def wechat_config():
    return WeChatConfig(app_id="wxAPP", secret="s3cret")


@pytest.fixture
def session():
    return FakeSession(token_responses=[token_ok()], send_responses=[send_ok()])


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("WECHAT_APPID", "WECHAT_SECRET", "WECHAT_TEMPLATE_ID"):
        monkeypatch.delenv(var, raising=False)
