#!/usr/bin/env python3
"""
akmodels - Main Entry Point

Runs one AutoKeras architecture search described by a YAML configuration:
loads the data, builds the configured model, searches, evaluates the best
model on held-out data and saves the run artifacts.

Usage:
    python main.py [--config path/to/config.yaml] [--no-save] [--log-stats]
"""

import argparse
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from akmodels import AutoMLPipeline
from akmodels.log_manager import clean_old_logs, print_log_stats, setup_logging_from_config


def main():
    """Main entry point for a configuration-driven search."""

    setup_logging_from_config()

    parser = argparse.ArgumentParser(
        description="AutoKeras model search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Run with default configuration
    python main.py

    # Run with custom configuration
    python main.py --config configs/text_classifier.yaml
    """
    )
    parser.add_argument(
        '--config',
        type=str,
        default='configs/config.yaml',
        help='Path to configuration file (default: configs/config.yaml)'
    )

    parser.add_argument(
        '--no-save',
        action='store_true',
        help='Do not export the model or save artifacts to disk'
    )

    parser.add_argument(
        '--log-stats',
        action='store_true',
        help='Show log statistics and exit'
    )

    parser.add_argument(
        '--clean-logs',
        type=int,
        metavar='DAYS',
        help='Remove log files older than DAYS days and exit'
    )

    args = parser.parse_args()

    logs_dir = project_root / "logs"
    if args.log_stats:
        print_log_stats(logs_dir)
        return 0

    if args.clean_logs is not None:
        cleaned = clean_old_logs(logs_dir, days=args.clean_logs)
        print(f"🧹 Cleaned {cleaned} old log files")
        return 0

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"❌ Configuration file not found: {config_path}")
        print("Please ensure the configuration file exists or specify a valid path with --config")
        return 1

    try:
        print(f"📋 Loading configuration: {config_path}")
        pipeline = AutoMLPipeline(config_path)

        print(f"📁 Output directory: {pipeline.output_dir}")
        print(f"🎯 Model type: {pipeline.config.model_type.value}")
        print(f"🔍 Max trials: {pipeline.config.model.get('max_trials', 100)}")

        print("\n🚀 Starting AutoKeras search...")
        pipeline.run(save_artifacts=not args.no_save)

        pipeline.print_summary()

        if not args.no_save:
            print(f"\n📁 Results saved to: {pipeline.output_dir}")
            print(f"   • Full results: {pipeline.output_dir / 'pipeline_results.json'}")
            print(f"   • Summary report: {pipeline.output_dir / 'pipeline_summary.txt'}")

        print("\n✅ Search completed successfully!")
        return 0

    except KeyboardInterrupt:
        print("\n\n⏹️  Search interrupted by user")
        return 1

    except Exception as e:
        print(f"\n❌ Search failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
