"""YAML configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from akmodels import Config, ModelType, load_config


def test_load_and_access(make_config):
    path = make_config({"type": "text_classifier", "max_trials": 3}, {"train_path": "x.csv"})
    config = load_config(path)

    assert config.model_type is ModelType.TEXT_CLASSIFIER
    assert config.model_kwargs == {"max_trials": 3}
    assert config.get("data.train_path") == "x.csv"
    assert config.get("data.missing", "fallback") == "fallback"
    assert config.predict == {}


def test_set_creates_nested_keys(make_config):
    config = Config(make_config({"type": "image_regressor"}, {}))
    config.set("predict.batch_size", 64)
    assert config.predict == {"batch_size": 64}


def test_missing_section(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"model": {"type": "image_classifier"}, "data": {}}))
    with pytest.raises(ValueError, match="Missing required configuration section: fit"):
        Config(path)


def test_unknown_model_type(make_config):
    with pytest.raises(ValueError, match="Unknown model type"):
        Config(make_config({"type": "graph_classifier"}, {}))


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        Config(tmp_path / "nope.yaml")


def test_save_round_trip(make_config, tmp_path: Path):
    config = Config(make_config({"type": "text_regressor", "seed": 1}, {"train_path": "t.csv"}))
    out = tmp_path / "saved" / "config.yaml"
    config.save(out)

    assert Config(out).to_dict() == config.to_dict()
