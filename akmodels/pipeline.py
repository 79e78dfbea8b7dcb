"""
Pipeline orchestrator for configuration-driven AutoKeras runs.

This module provides the high-level interface that coordinates all components:
- Configuration management
- Data loading and test split
- Model construction and architecture search
- Evaluation on held-out data
- Model export and results reporting

The Pipeline class serves as the single entry point for the command line.
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union
from datetime import datetime

from .config import Config
from .data_loader import DataProcessor
from .evaluator import evaluate
from .export import save_model
from .models import AutokerasModel, build_model
from .trainer import fit
from .utils import format_time, save_json


class AutoMLPipeline:
    """
    End-to-end AutoKeras run driven by a YAML configuration.

    Loads data, builds the configured model handle, runs the search,
    evaluates the best model and saves the artifacts of the run.
    """

    def __init__(self, config_path: Union[str, Path]):
        """
        Initialize the AutoML pipeline.

        Args:
            config_path: Path to the configuration YAML file
        """
        self.config = Config(config_path)
        self.logger = logging.getLogger(__name__)

        self.data_processor: Optional[DataProcessor] = None
        self.data: Dict[str, Any] = {}
        self.handle: Optional[AutokerasModel] = None

        self.results: Dict[str, Any] = {}
        self.pipeline_info = {
            'start_time': None,
            'end_time': None,
            'total_time': None,
            'status': 'initialized',
            'current_stage': None,
            'stages_completed': [],
            'config_path': str(config_path),
            'model_type': self.config.model_type.value
        }

        # Timestamped output directory for this run
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        base_output_dir = Path(self.config.output.get('output_dir', 'runs'))
        self.output_dir = base_output_dir / f"run_{timestamp}"
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.logger.info("AutoML Pipeline initialized")
        self.logger.info(f"Configuration: {config_path}")
        self.logger.info(f"Model type: {self.config.model_type.value}")
        self.logger.info(f"Output directory: {self.output_dir}")

    def run(self, save_artifacts: bool = True) -> Dict[str, Any]:
        """
        Run the complete pipeline.

        Args:
            save_artifacts: Whether to export the model and save results to disk

        Returns:
            Dictionary containing all pipeline results
        """
        self.pipeline_info['start_time'] = time.time()
        self.pipeline_info['status'] = 'running'
        self.results['pipeline_info'] = self.pipeline_info

        try:
            self.logger.info("="*60)
            self.logger.info("STARTING AUTOML PIPELINE")
            self.logger.info("="*60)

            self._run_stage("data_loading", self._load_data)
            self._run_stage("model_construction", self._build_model)
            self._run_stage("search", self._search)
            self._run_stage("evaluation", self._evaluate_model)

            if save_artifacts and self.config.output.get('export_filename'):
                self._run_stage("export", self._export_model)

            # Timing is final before the artifacts that report it are written
            self._finalize_pipeline()

            if save_artifacts:
                self._run_stage("saving_artifacts", self._save_artifacts)

            self.logger.info("="*60)
            self.logger.info("AUTOML PIPELINE COMPLETED SUCCESSFULLY")
            self.logger.info("="*60)

            return self.results

        except Exception as e:
            self.pipeline_info['status'] = 'failed'
            self.pipeline_info['error'] = str(e)
            self.logger.error(f"Pipeline failed: {e}")
            raise

    def _run_stage(self, stage_name: str, stage_function):
        """Run a pipeline stage with logging and error handling."""
        self.pipeline_info['current_stage'] = stage_name
        self.logger.info(f"Starting stage: {stage_name}")

        stage_start = time.time()
        try:
            stage_function()
            stage_time = time.time() - stage_start

            self.pipeline_info['stages_completed'].append({
                'name': stage_name,
                'duration': stage_time,
                'status': 'completed'
            })

            self.logger.info(f"Stage '{stage_name}' completed in {stage_time:.1f}s")

        except Exception as e:
            stage_time = time.time() - stage_start
            self.pipeline_info['stages_completed'].append({
                'name': stage_name,
                'duration': stage_time,
                'status': 'failed',
                'error': str(e)
            })
            raise

    def _load_data(self):
        """Load the dataset and hold out the test split."""
        self.data_processor = DataProcessor(self.config)
        self.data = self.data_processor.prepare_data()
        self.results['data_info'] = self.data['info']

    def _build_model(self):
        """Construct the configured model handle."""
        model_kwargs = self.config.model_kwargs
        # Keep search state inside the run directory unless configured otherwise
        model_kwargs.setdefault('directory', str(self.output_dir / 'search'))

        self.handle = build_model(self.config.model_type, **model_kwargs)

        self.results['model'] = {
            'model_type': self.config.model_type.value,
            'parameters': model_kwargs
        }
        self.logger.info(f"Built {self.handle!r}")

    def _search(self):
        """Run the architecture search on the training split."""
        fit_config = self.config.fit
        search_start = time.time()

        fit(
            self.handle,
            self.data['x_train'],
            self.data['y_train'],
            epochs=fit_config.get('epochs', 1000),
            validation_split=fit_config.get('validation_split', 0.2)
        )

        self.results['search'] = {
            'epochs': int(fit_config.get('epochs', 1000)),
            'validation_split': fit_config.get('validation_split', 0.2),
            'search_time': time.time() - search_start
        }

    def _evaluate_model(self):
        """Evaluate the best model on the held-out test split."""
        batch_size = self.config.predict.get('batch_size', 32)
        scores = evaluate(self.handle, self.data['x_test'], self.data['y_test'], batch_size=batch_size)

        if not isinstance(scores, (list, tuple)):
            scores = [scores]
        self.results['evaluation'] = {'test_scores': [float(s) for s in scores]}

        self.logger.info(f"Test scores (loss first): {self.results['evaluation']['test_scores']}")

    def _export_model(self):
        """Export the best model into the run directory."""
        export_path = self.output_dir / self.config.output['export_filename']
        self.results['export_path'] = str(save_model(self.handle, export_path))

    def _save_artifacts(self):
        """Save the configuration, results and a summary report."""
        self.logger.info("Saving artifacts and results...")

        config_path = self.output_dir / self.config.output.get('config_filename', 'config.yaml')
        self.config.save(config_path)

        results_path = self.output_dir / 'pipeline_results.json'
        self._save_results_to_json(results_path)

        summary_path = self.output_dir / 'pipeline_summary.txt'
        self._generate_summary_report(summary_path)

        self.logger.info(f"Artifacts saved to: {self.output_dir}")
        self.logger.info(f"  - Configuration: {config_path}")
        self.logger.info(f"  - Results: {results_path}")
        self.logger.info(f"  - Summary: {summary_path}")

    def _finalize_pipeline(self):
        """Finalize the pipeline execution."""
        self.pipeline_info['end_time'] = time.time()
        self.pipeline_info['total_time'] = self.pipeline_info['end_time'] - self.pipeline_info['start_time']
        self.pipeline_info['status'] = 'completed'
        self.pipeline_info['current_stage'] = None

        self.logger.info(f"Pipeline completed in {self.pipeline_info['total_time']:.1f}s")

    def _save_results_to_json(self, output_path: Path):
        """Save complete results to JSON file."""
        save_json(self._make_json_serializable(self.results.copy()), output_path)

    def _make_json_serializable(self, obj):
        """Convert object to JSON-serializable format."""
        if isinstance(obj, dict):
            return {k: self._make_json_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [self._make_json_serializable(v) for v in obj]
        elif hasattr(obj, 'tolist'):  # numpy arrays
            return obj.tolist()
        elif isinstance(obj, (int, float, str, bool, type(None))):
            return obj
        else:
            return str(obj)

    def _generate_summary_report(self, output_path: Path):
        """Generate a human-readable summary report."""
        with open(output_path, 'w') as f:
            f.write("="*80 + "\n")
            f.write("AUTOML PIPELINE SUMMARY REPORT\n")
            f.write("="*80 + "\n\n")

            f.write("PIPELINE INFORMATION\n")
            f.write("-"*40 + "\n")
            total_time = self.pipeline_info.get('total_time') or 0
            f.write(f"Total execution time: {format_time(total_time)}\n")
            f.write(f"Model type: {self.pipeline_info['model_type']}\n")
            f.write(f"Configuration file: {self.pipeline_info['config_path']}\n")
            f.write(f"Output directory: {self.output_dir}\n\n")

            if 'data_info' in self.results:
                data_info = self.results['data_info']
                f.write("DATASET INFORMATION\n")
                f.write("-"*40 + "\n")
                f.write(f"Train samples: {data_info['train_samples']}\n")
                f.write(f"Test samples: {data_info['test_samples']}\n")
                if 'columns' in data_info:
                    f.write(f"Columns: {', '.join(data_info['columns'])}\n")
                f.write("\n")

            if 'model' in self.results:
                model = self.results['model']
                f.write("MODEL\n")
                f.write("-"*40 + "\n")
                f.write(f"Model type: {model['model_type']}\n")
                f.write("Parameters:\n")
                for param, value in model['parameters'].items():
                    f.write(f"  - {param}: {value}\n")
                f.write("\n")

            if 'search' in self.results:
                search = self.results['search']
                f.write("SEARCH\n")
                f.write("-"*40 + "\n")
                f.write(f"Max epochs per trial: {search['epochs']}\n")
                f.write(f"Validation split: {search['validation_split']}\n")
                f.write(f"Search time: {format_time(search['search_time'])}\n\n")

            if 'evaluation' in self.results:
                scores = self.results['evaluation']['test_scores']
                f.write("FINAL EVALUATION RESULTS\n")
                f.write("-"*40 + "\n")
                f.write(f"Test loss: {scores[0]:.4f}\n")
                for i, score in enumerate(scores[1:], start=1):
                    f.write(f"Metric {i}: {score:.4f}\n")
                f.write("\n")

            if 'export_path' in self.results:
                f.write(f"Exported model: {self.results['export_path']}\n\n")

            f.write("="*80 + "\n")
            f.write("End of Report\n")
            f.write("="*80 + "\n")

    def get_summary(self) -> Dict[str, Any]:
        """Get a concise summary of the pipeline results."""
        if not self.results:
            return {"status": "not_run", "message": "Pipeline has not been executed yet"}

        summary = {
            "status": self.pipeline_info.get('status', 'unknown'),
            "execution_time": self.pipeline_info.get('total_time') or 0,
            "model_type": self.pipeline_info['model_type']
        }

        if 'data_info' in self.results:
            summary['dataset'] = {
                'train_samples': self.results['data_info']['train_samples'],
                'test_samples': self.results['data_info']['test_samples']
            }

        if 'search' in self.results:
            summary['search_time'] = self.results['search']['search_time']

        if 'evaluation' in self.results:
            summary['test_scores'] = self.results['evaluation']['test_scores']

        return summary

    def print_summary(self):
        """Print a formatted summary of the pipeline results."""
        summary = self.get_summary()

        print("\n" + "="*60)
        print("AUTOML PIPELINE SUMMARY")
        print("="*60)

        print(f"Status: {summary['status']}")
        if summary['status'] == 'not_run':
            print("="*60)
            return

        print(f"Execution Time: {summary['execution_time']:.1f}s")
        print(f"Model Type: {summary['model_type']}")

        if 'dataset' in summary:
            print(f"\nTrain samples: {summary['dataset']['train_samples']}")
            print(f"Test samples: {summary['dataset']['test_samples']}")

        if 'search_time' in summary:
            print(f"\nSearch Time: {summary['search_time']:.1f}s")

        if 'test_scores' in summary:
            print(f"Test Scores: {', '.join(f'{s:.4f}' for s in summary['test_scores'])}")

        print("="*60)
