import pytest
from pydantic import ValidationError

from jwkdemo.config import DEFAULT_MESSAGE, load_config


def test_defaults(monkeypatch):
    for var in ("JWKDEMO_RSA_MODULUS_LENGTH", "JWKDEMO_LOG_LEVEL", "JWKDEMO_KEYS_DIR", "JWKDEMO_DEMO_MESSAGE"):
        monkeypatch.delenv(var, raising=False)
    cfg = load_config()
    assert cfg.rsa_modulus_length == 2048
    assert cfg.log_level == "INFO"
    assert cfg.keys_dir == "keys"
    assert cfg.demo_message == DEFAULT_MESSAGE


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("JWKDEMO_RSA_MODULUS_LENGTH", "3072")
    monkeypatch.setenv("JWKDEMO_KEYS_DIR", "/tmp/k")
    cfg = load_config()
    assert cfg.rsa_modulus_length == 3072
    assert cfg.keys_dir == "/tmp/k"


@pytest.mark.parametrize(
    "var,value",
    [
        ("JWKDEMO_RSA_MODULUS_LENGTH", "big"),
        ("JWKDEMO_RSA_MODULUS_LENGTH", "512"),
        ("JWKDEMO_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_env_values(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValidationError):
        load_config()


def test_log_level_normalised(monkeypatch):
    monkeypatch.setenv("JWKDEMO_LOG_LEVEL", "debug")
    assert load_config().log_level == "DEBUG"
