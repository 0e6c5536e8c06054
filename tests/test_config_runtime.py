"""Tests for the runtime configuration loader."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from geovec import random_source
from geovec.config import settings
from geovec.vector2 import Vector2
from geovec.vector3 import Vector3


def _write_tmp_config(tmp_path: Path, content: str) -> Path:
    file_path = tmp_path / "conf.yaml"
    file_path.write_text(content, encoding="utf-8")
    return file_path


@pytest.fixture()
def restore_settings():
    original = settings.current_settings()
    yield
    settings.apply_runtime_settings(original)
    random_source.set_rng(None)


def test_defaults_without_overrides():
    conf = settings.load_runtime_settings(args=[], env={})
    assert conf.EQUAL_TOLERANCE == pytest.approx(1e-7)
    assert conf.RANDOM_SEED is None
    assert conf.LOG_TO_FILE is False


def test_env_overrides_take_effect(monkeypatch):
    monkeypatch.setenv("GEOVEC_EQUAL_TOLERANCE", "0.001")
    conf = settings.load_runtime_settings(args=[], env=os.environ)
    assert conf.EQUAL_TOLERANCE == pytest.approx(0.001)


def test_cli_overrides_take_precedence():
    conf = settings.load_runtime_settings(args=["--random-seed", "42", "--log-to-file"], env={})
    assert conf.RANDOM_SEED == 42
    assert conf.LOG_TO_FILE is True


def test_config_file_used_when_provided(tmp_path):
    config = _write_tmp_config(tmp_path, "equal_tolerance: 0.0001\nrandom_seed: 8\ndebug_log_level: debug\n")
    conf = settings.load_runtime_settings(args=["--config", str(config)], env={})
    assert conf.EQUAL_TOLERANCE == pytest.approx(0.0001)
    assert conf.RANDOM_SEED == 8
    assert conf.DEBUG_LOG_LEVEL == "DEBUG"


def test_config_file_from_env_var(tmp_path):
    config = _write_tmp_config(tmp_path, "log_directory: custom_logs\n")
    conf = settings.load_runtime_settings(args=[], env={"GEOVEC_CONFIG_FILE": str(config)})
    assert conf.LOG_DIRECTORY == Path("custom_logs")


def test_env_overrides_config(tmp_path):
    config = _write_tmp_config(tmp_path, "random_seed: 1\n")
    conf = settings.load_runtime_settings(
        args=["--config", str(config)],
        env={"GEOVEC_RANDOM_SEED": "2"},
    )
    assert conf.RANDOM_SEED == 2


def test_cli_overrides_config_and_env(tmp_path):
    config = _write_tmp_config(tmp_path, "random_seed: 1\n")
    conf = settings.load_runtime_settings(
        args=["--config", str(config), "--random-seed", "3"],
        env={"GEOVEC_RANDOM_SEED": "2"},
    )
    assert conf.RANDOM_SEED == 3


def test_invalid_field_in_config_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "unknown_value: 1\n")
    with pytest.raises(ValueError, match="Unknown config field"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_non_mapping_config_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "- 1\n- 2\n")
    with pytest.raises(ValueError, match="must define a mapping"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_missing_config_file_errors(tmp_path):
    missing = tmp_path / "missing.yaml"
    with pytest.raises(FileNotFoundError):
        settings.load_runtime_settings(args=["--config", str(missing)], env={})


def test_invalid_numeric_range_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "equal_tolerance: 5\n")
    with pytest.raises(ValueError, match="EQUAL_TOLERANCE"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_invalid_log_level_raises():
    with pytest.raises(ValueError, match="DEBUG_LOG_LEVEL"):
        settings.load_runtime_settings(args=["--debug-log-level", "chatty"], env={})


def test_apply_changes_equality_default(restore_settings):
    loose = settings.load_runtime_settings(args=["--equal-tolerance", "0.01"], env={})
    settings.apply_runtime_settings(loose)
    assert settings.current_settings() is loose
    assert Vector3(1, 2, 3).equal(Vector3(1.005, 2, 3))
    assert Vector2(1, 2).equal(Vector2(1, 2.005))


def test_apply_with_seed_reseeds_random_source(restore_settings):
    seeded = settings.load_runtime_settings(args=["--random-seed", "2024"], env={})
    settings.apply_runtime_settings(seeded)
    first = Vector3.random()
    settings.apply_runtime_settings(seeded)
    assert Vector3.random() == first


@pytest.mark.parametrize("seed", ["-5", "0", str(2**80)])
def test_any_integer_seed_is_accepted(seed):
    conf = settings.load_runtime_settings(args=["--random-seed", seed], env={})
    assert conf.RANDOM_SEED == int(seed)
