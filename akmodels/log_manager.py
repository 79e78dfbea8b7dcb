"""
Log management utilities for akmodels.

Provides utilities for logging setup, log cleanup and log statistics.
"""

from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from .utils import setup_logger


def setup_logging_from_config(log_dir: Optional[Path] = None) -> None:
    """
    Setup the package logger that every module logger propagates to.

    Args:
        log_dir: Directory for log files (default: logs/ in the project root)
    """
    setup_logger("akmodels", log_dir=log_dir)


def clean_old_logs(logs_dir: Path, days: int = 0) -> int:
    """
    Remove log files last modified more than ``days`` days ago.

    Args:
        logs_dir: Directory containing log files
        days: Age threshold in days (0 removes every log file)

    Returns:
        Number of files cleaned
    """
    if not logs_dir.exists():
        return 0

    cutoff = datetime.now() - timedelta(days=days)
    cleaned_count = 0

    for log_file in logs_dir.glob("*.log*"):
        if datetime.fromtimestamp(log_file.stat().st_mtime) > cutoff:
            continue
        try:
            log_file.unlink()
            cleaned_count += 1
            print(f"🗑️  Cleaned old log: {log_file.name}")
        except OSError as e:
            print(f"⚠️  Failed to clean {log_file.name}: {e}")

    return cleaned_count


def get_log_stats(logs_dir: Path) -> dict:
    """
    Get statistics about log files.

    Args:
        logs_dir: Directory containing log files

    Returns:
        Dictionary with log statistics
    """
    stats = {
        "total_files": 0,
        "total_size_mb": 0,
        "files": []
    }

    if not logs_dir.exists():
        return stats

    for log_file in logs_dir.glob("*.log*"):
        size_mb = log_file.stat().st_size / (1024 * 1024)
        modified = datetime.fromtimestamp(log_file.stat().st_mtime)

        stats["files"].append({
            "name": log_file.name,
            "size_mb": round(size_mb, 2),
            "modified": modified.strftime("%Y-%m-%d %H:%M:%S")
        })

        stats["total_files"] += 1
        stats["total_size_mb"] += size_mb

    stats["total_size_mb"] = round(stats["total_size_mb"], 2)
    stats["files"].sort(key=lambda x: x["modified"], reverse=True)

    return stats


def print_log_stats(logs_dir: Path) -> None:
    """Print log statistics to console."""
    stats = get_log_stats(logs_dir)

    print(f"\n📊 Log Statistics for {logs_dir}")
    print(f"{'='*50}")
    print(f"Total files: {stats['total_files']}")
    print(f"Total size: {stats['total_size_mb']} MB")

    if stats["files"]:
        print("\nFiles:")
        for file_info in stats["files"]:
            print(f"  {file_info['name']:<25} {file_info['size_mb']:>8.2f} MB  {file_info['modified']}")

    print()
