import os

import pytest
import structlog

import settings as settings_mod
from logger import configure_logging, get_logger
from settings import Settings, get_settings

ENV_VARS = [
    "SIGNAL_ENCODING_APPEND_FINAL_STATE",
    "SIGNAL_ENCODING_DEFAULT_BITS",
    "SIGNAL_ENCODING_RANDOM_BITS_MAX",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.setattr(settings_mod, "_ENV_PATH", tmp_path / ".env")
    return monkeypatch


def test_defaults(clean_env):
    assert get_settings() == Settings()


def test_env_overrides(clean_env):
    clean_env.setenv("SIGNAL_ENCODING_APPEND_FINAL_STATE", "no")
    clean_env.setenv("SIGNAL_ENCODING_DEFAULT_BITS", " 0110 ")
    clean_env.setenv("SIGNAL_ENCODING_RANDOM_BITS_MAX", "128")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("LOG_FORMAT", "JSON")
    s = get_settings()
    assert s.append_final_state is False
    assert s.default_bits == "0110"
    assert s.random_bits_max == 128
    assert s.log_level == "DEBUG"
    assert s.log_format == "json"


def test_dotenv_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("SIGNAL_ENCODING_DEFAULT_BITS=111\n")
    clean_env.setattr(settings_mod, "_ENV_PATH", env_file)
    try:
        assert get_settings().default_bits == "111"
    finally:
        # load_dotenv writes os.environ directly
        os.environ.pop("SIGNAL_ENCODING_DEFAULT_BITS", None)


@pytest.mark.parametrize("name, value", [
    ("SIGNAL_ENCODING_APPEND_FINAL_STATE", "maybe"),
    ("SIGNAL_ENCODING_RANDOM_BITS_MAX", "lots"),
    ("SIGNAL_ENCODING_RANDOM_BITS_MAX", "0"),
    ("SIGNAL_ENCODING_DEFAULT_BITS", "10a"),
    ("LOG_FORMAT", "xml"),
    ("LOG_LEVEL", "verbose"),
])
def test_invalid_values_raise(clean_env, name, value):
    clean_env.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        get_settings()


def test_get_logger_emits_event(clean_env, capsys):
    structlog.reset_defaults()
    configure_logging(Settings(log_format="json"))
    get_logger("tests").info("encoding_completed", input_len=3)
    err = capsys.readouterr().err
    assert '"event": "encoding_completed"' in err
    assert '"input_len": 3' in err
    assert '"logger": "tests"' in err
    structlog.reset_defaults()
