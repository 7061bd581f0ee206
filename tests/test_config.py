from pathlib import Path

import pytest

from responder.config import DEFAULT_FALLBACK_RESPONSE, ResponderConfig, load_config


def test_load_config_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("keyword_responses_path: data/keywords.txt", encoding="utf-8")

    cfg = load_config(path)

    assert isinstance(cfg, ResponderConfig)
    assert cfg.keyword_responses_path == Path("data/keywords.txt")
    assert cfg.default_responses_path == Path("default.txt")
    assert cfg.fallback_response == DEFAULT_FALLBACK_RESPONSE


def test_load_config_without_file_uses_working_directory_names(monkeypatch):
    monkeypatch.delenv("RESPONDER_KEYWORD_RESPONSES_PATH", raising=False)
    monkeypatch.delenv("RESPONDER_DEFAULT_RESPONSES_PATH", raising=False)

    cfg = load_config()

    assert cfg.keyword_responses_path == Path("systemresponses.txt")
    assert cfg.default_responses_path == Path("default.txt")
    assert cfg.exit_word == "bye"


def test_empty_yaml_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == ResponderConfig()


def test_env_overrides(monkeypatch, tmp_path):
    source = tmp_path / "config.yml"
    source.write_text("default_responses_path: from-yaml.txt", encoding="utf-8")

    monkeypatch.setenv("RESPONDER_DEFAULT_RESPONSES_PATH", "from-env.txt")
    monkeypatch.setenv("RESPONDER_EXIT_WORD", "Quit")

    cfg = load_config(source)

    assert cfg.default_responses_path == Path("from-env.txt")
    assert cfg.exit_word == "quit"


def test_blank_fallback_response_is_replaced(tmp_path):
    source = tmp_path / "config.yml"
    source.write_text("fallback_response: ''", encoding="utf-8")

    assert load_config(source).fallback_response == DEFAULT_FALLBACK_RESPONSE


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_shipped_defaults_match_dataclass_defaults(monkeypatch):
    for env_name in ("RESPONDER_KEYWORD_RESPONSES_PATH", "RESPONDER_DEFAULT_RESPONSES_PATH",
                     "RESPONDER_ENCODING", "RESPONDER_FALLBACK_RESPONSE", "RESPONDER_EXIT_WORD"):
        monkeypatch.delenv(env_name, raising=False)
    path = Path(__file__).parent.parent / "config" / "responder.defaults.yml"

    assert load_config(path) == ResponderConfig()


def test_scalar_values_become_strings(tmp_path, monkeypatch):
    monkeypatch.delenv("RESPONDER_FALLBACK_RESPONSE", raising=False)
    monkeypatch.delenv("RESPONDER_ENCODING", raising=False)
    source = tmp_path / "config.yml"
    source.write_text("fallback_response: 42\nencoding: 8859\n", encoding="utf-8")

    cfg = load_config(source)

    assert cfg.fallback_response == "42"
    assert cfg.encoding == "8859"
