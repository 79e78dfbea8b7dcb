"""
Shared fixtures: an in-process stand-in for the autokeras namespace so the
tests exercise argument adaptation without running a search.
"""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import numpy as np
import pandas as pd
import pytest
import yaml

import akmodels.models.base as base


class FakeKerasModel:
    """Mimics the Keras model returned by export_model."""

    def __init__(self):
        self.saved_to = None

    def save(self, filepath):
        self.saved_to = filepath
        Path(filepath).write_text("saved")


class FakeAutoModel:
    """Records constructor arguments and every forwarded call."""

    def __init__(self, **kwargs):
        self.init_kwargs = kwargs
        self.calls = []
        self.exported = FakeKerasModel()

    def fit(self, **kwargs):
        self.calls.append(("fit", kwargs))

    def predict(self, **kwargs):
        self.calls.append(("predict", kwargs))
        return np.zeros((len(kwargs["x"]), 1))

    def evaluate(self, **kwargs):
        self.calls.append(("evaluate", kwargs))
        return [0.5, 0.75]

    def export_model(self):
        self.calls.append(("export_model", {}))
        return self.exported


def _fake_class(name):
    return type(name, (FakeAutoModel,), {})


@pytest.fixture
def fake_autokeras(monkeypatch):
    """Replace the wrapped library with fake model classes."""
    library = SimpleNamespace(
        StructuredDataRegressor=_fake_class("StructuredDataRegressor"),
        StructuredDataClassifier=_fake_class("StructuredDataClassifier"),
        ImageRegressor=_fake_class("ImageRegressor"),
        ImageClassifier=_fake_class("ImageClassifier"),
        TextRegressor=_fake_class("TextRegressor"),
        TextClassifier=_fake_class("TextClassifier"),
        CUSTOM_OBJECTS={},
    )
    monkeypatch.setattr(base, "load_library", lambda: library)
    return library


def _write_yaml(d: dict, path: Path) -> None:
    path.write_text(yaml.safe_dump(d, sort_keys=False))


@pytest.fixture
def structured_csv(tmp_path: Path) -> Path:
    rng = np.random.default_rng(0)
    df = pd.DataFrame({
        "a": rng.normal(size=20),
        "b": rng.integers(0, 3, size=20),
        "target": rng.normal(size=20),
    })
    path = tmp_path / "train.csv"
    df.to_csv(path, index=False)
    return path


@pytest.fixture
def text_csv(tmp_path: Path) -> Path:
    df = pd.DataFrame({
        "text": [f"review number {i}" for i in range(20)],
        "label": [i % 2 for i in range(20)],
    })
    path = tmp_path / "reviews.csv"
    df.to_csv(path, index=False)
    return path


@pytest.fixture
def make_config(tmp_path: Path):
    """Write a config dict to YAML and return its path."""

    def _make(model: dict, data: dict, **sections) -> Path:
        cfg = {
            "model": model,
            "data": data,
            "fit": sections.get("fit", {"epochs": 2.0, "validation_split": 0.1}),
            "output": sections.get("output", {"output_dir": str(tmp_path / "runs"), "config_filename": "config.yaml"}),
        }
        if "predict" in sections:
            cfg["predict"] = sections["predict"]
        dst = tmp_path / "config.yaml"
        _write_yaml(cfg, dst)
        return dst

    return _make
