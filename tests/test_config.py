import pytest

from wechatnotify.config import (
    AUTO_URL_PREFIX,
    TEMPLATE_ID,
    WECHAT_HOST,
    Config,
    get_default_config_toml,
    load_config,
)
from wechatnotify.errors import ConfigError


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "missing.toml")
    assert config.wechat.app_id == ""
    assert config.wechat.template_id == TEMPLATE_ID
    assert config.wechat.api_host == WECHAT_HOST
    assert config.wechat.auto_url_prefix == AUTO_URL_PREFIX
    assert config.wechat.timeout is None
    assert config.log_file is None


def test_load_from_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        'log_file = "/tmp/wn.log"\n'
        "[wechat]\n"
        'app_id = "wxFILE"\n'
        'secret = "file-secret"\n'
        'template_id = "tpl"\n'
        "timeout = 3.5\n"
    )
    config = load_config(path)
    assert config.wechat.app_id == "wxFILE"
    assert config.wechat.secret == "file-secret"
    assert config.wechat.template_id == "tpl"
    assert config.wechat.timeout == 3.5
    assert str(config.log_file) == "/tmp/wn.log"


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text('[wechat]\napp_id = "wxFILE"\nsecret = "file-secret"\n')
    monkeypatch.setenv("WECHAT_APPID", "wxENV")
    monkeypatch.setenv("WECHAT_TEMPLATE_ID", "tplENV")
    config = load_config(path)
    assert config.wechat.app_id == "wxENV"
    assert config.wechat.secret == "file-secret"
    assert config.wechat.template_id == "tplENV"


def test_invalid_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[wechat\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_unknown_key(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[wechat]\nappid = "typo"\n')
    with pytest.raises(ConfigError):
        load_config(path)


def test_validate():
    with pytest.raises(ConfigError, match="app_id, secret"):
        Config().validate()
    config = Config()
    config.wechat.app_id = "wx"
    config.wechat.secret = "s"
    config.validate()


def test_default_toml_loads(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(get_default_config_toml())
    config = load_config(path)
    assert config.wechat.template_id == TEMPLATE_ID
    assert config.wechat.api_host == WECHAT_HOST
