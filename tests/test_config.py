from __future__ import annotations

from pathlib import Path

import pytest

from primepath.core.config import Config
from primepath.core.exceptions import ConfigurationError
from primepath.core.resolver import ResolutionPolicy


def test_defaults_without_files(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PRIMEPATH_POLICY", raising=False)
    config = Config()
    assert config.resolution_policy is ResolutionPolicy.BEST_REACHABLE_SUFFIX
    assert config.get("logging.level") == "WARNING"


def test_env_policy(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PRIMEPATH_POLICY", "strict-sink")
    assert Config().resolution_policy is ResolutionPolicy.STRICT_SINK


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("resolver:\n  policy: strict-sink\nlogging:\n  level: DEBUG\n", encoding="utf-8")
    config = Config(str(path))
    assert config.resolution_policy is ResolutionPolicy.STRICT_SINK
    assert config.logging_config["level"] == "DEBUG"
    assert "format" in config.logging_config


def test_environment_file_lookup(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "ci.yaml").write_text("resolver:\n  policy: strict_sink\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert Config(environment="ci").resolution_policy is ResolutionPolicy.STRICT_SINK


def test_set_and_get_dot_paths(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = Config()
    config.set("output.table.title", "Path")
    assert config.get("output.table.title") == "Path"
    assert config.get("output.missing", 3) == 3


def test_unknown_policy(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = Config()
    config.set("resolver.policy", "sink-only")
    with pytest.raises(ConfigurationError):
        config.resolution_policy


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("resolver: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        Config(str(path))


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        Config(str(tmp_path / "absent.yaml"))
