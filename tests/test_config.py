"""
Test tracker configuration models and loaders.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from golfscores.config import TrackerConfig, load_tracker_config
from golfscores.config.loaders import DATA_DIR_ENV_VAR


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv(DATA_DIR_ENV_VAR, raising=False)


def test_defaults_when_no_config_file(tmp_path: Path) -> None:
    config = load_tracker_config(base_dir=tmp_path)
    assert config == TrackerConfig()
    assert config.data_dir == Path(".")
    assert config.allow_invalid_score_as_zero is False


def test_from_dict_ignores_unknown_keys() -> None:
    config = TrackerConfig.from_dict(
        {"data_dir": "scores", "log_level": "DEBUG", "course_dir": "ignored"}
    )
    assert config.data_dir == Path("scores")
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "data",
    [{"file_extension": "csv"}, {"log_level": "LOUD"}, {"encoding": ""}],
)
def test_from_dict_validates(data) -> None:
    with pytest.raises(ValueError):
        TrackerConfig.from_dict(data)


def test_discovers_config_in_config_subdir(tmp_path: Path) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "score_tracker_config.json").write_text(
        json.dumps({"data_dir": "from_subdir", "allow_invalid_score_as_zero": True})
    )
    (tmp_path / "score_tracker_config.json").write_text(json.dumps({"data_dir": "from_root"}))

    config = load_tracker_config(base_dir=tmp_path)
    assert config.data_dir == Path("from_subdir")
    assert config.allow_invalid_score_as_zero is True


def test_explicit_config_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_tracker_config(tmp_path / "missing.json")


def test_invalid_json_is_a_value_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_tracker_config(path)


def test_env_var_overrides_data_dir(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(DATA_DIR_ENV_VAR, str(tmp_path / "env_scores"))
    config = load_tracker_config(base_dir=tmp_path)
    assert config.data_dir == tmp_path / "env_scores"


def test_with_args_applies_only_given_overrides() -> None:
    base = TrackerConfig(log_level="WARNING", data_dir=Path("base"))
    args = argparse.Namespace(data_dir="cli_dir", log_level=None, log_file=None)

    config = base.with_args(args)
    assert config.data_dir == Path("cli_dir")
    assert config.log_level == "WARNING"
    assert base.data_dir == Path("base")
