"""Log statistics and cleanup."""

from __future__ import annotations

import os
import time
from pathlib import Path

from akmodels.log_manager import clean_old_logs, get_log_stats


def test_log_stats(tmp_path: Path):
    (tmp_path / "akmodels.log").write_text("line\n")
    (tmp_path / "akmodels.log.1").write_text("older\n")

    stats = get_log_stats(tmp_path)

    assert stats["total_files"] == 2
    assert {f["name"] for f in stats["files"]} == {"akmodels.log", "akmodels.log.1"}


def test_log_stats_missing_dir(tmp_path: Path):
    assert get_log_stats(tmp_path / "none")["total_files"] == 0


def test_clean_old_logs_respects_age(tmp_path: Path):
    old = tmp_path / "akmodels.log.1"
    old.write_text("old")
    ten_days_ago = time.time() - 10 * 86400
    os.utime(old, (ten_days_ago, ten_days_ago))
    recent = tmp_path / "akmodels.log"
    recent.write_text("new")

    assert clean_old_logs(tmp_path, days=5) == 1
    assert recent.exists()
    assert not old.exists()
