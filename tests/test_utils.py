"""Logging setup and small helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np
import pytest

from akmodels.utils import as_integer, as_unicode_array, format_time, save_json, setup_logger


@pytest.fixture
def package_logger(tmp_path: Path):
    logger = setup_logger("akmodels_isolated", log_dir=tmp_path)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_child_logger_records_written_once(package_logger, tmp_path: Path):
    logging.getLogger("akmodels_isolated.pipeline").info("stage finished")

    log_lines = (tmp_path / "akmodels.log").read_text().splitlines()
    assert sum("stage finished" in line for line in log_lines) == 1


def test_setup_logger_is_idempotent(package_logger, tmp_path: Path):
    again = setup_logger("akmodels_isolated", log_dir=tmp_path)

    assert again is package_logger
    assert len(again.handlers) == 2


def test_as_integer():
    assert as_integer(None) is None
    assert as_integer(3.0) == 3
    assert type(as_integer(3.0)) is int


def test_as_unicode_array():
    arr = as_unicode_array(("one", "two"))
    assert arr.dtype.kind == "U"
    assert isinstance(arr, np.ndarray)


@pytest.mark.parametrize(
    "seconds, expected",
    [(5.4, "5s"), (125, "2m 5s"), (3 * 3600 + 61, "3h 1m 1s")],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


def test_save_json_creates_parent(tmp_path: Path):
    target = tmp_path / "out" / "results.json"
    save_json({"scores": [0.5], "path": Path("x")}, target)

    assert json.loads(target.read_text()) == {"scores": [0.5], "path": "x"}
