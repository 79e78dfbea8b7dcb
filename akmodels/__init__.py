"""
akmodels: AutoKeras model handles

Constructors for the AutoKeras structured data, image and text models plus
the ``fit``, ``predict``, ``evaluate`` and ``export_model`` verbs that
forward to them. The architecture search itself runs inside AutoKeras.
"""

__version__ = "0.1.0"

# Model constructors
from .models import (
    AutokerasModel,
    ModelType,
    build_model,
    model_image_classifier,
    model_image_regressor,
    model_structured_data_classifier,
    model_structured_data_regressor,
    model_text_classifier,
    model_text_regressor,
)

# Verbs
from .trainer import fit
from .evaluator import evaluate, predict
from .export import export_model, load_model, save_model

# Configuration-driven runs
from .config import Config, load_config
from .data_loader import DataProcessor
from .pipeline import AutoMLPipeline
from .utils import setup_logger

__all__ = [
    "AutokerasModel",
    "ModelType",
    "build_model",
    "model_structured_data_regressor",
    "model_structured_data_classifier",
    "model_image_regressor",
    "model_image_classifier",
    "model_text_regressor",
    "model_text_classifier",
    "fit",
    "predict",
    "evaluate",
    "export_model",
    "save_model",
    "load_model",
    "Config",
    "load_config",
    "DataProcessor",
    "AutoMLPipeline",
    "setup_logger",
]
