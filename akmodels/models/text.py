"""
Text model constructors.

x is a one-dimensional collection of strings (list, pandas Series or numpy
array); ``fit`` converts it to a numpy unicode array before the search
starts. y holds one label or target row per text.
"""

from typing import Any, List, Optional

from ..utils import as_integer, default_directory, random_seed
from .base import AutokerasModel, ModelType, construct


def model_text_regressor(
    output_dim: Optional[int] = None,
    loss: Any = "mean_squared_error",
    metrics: Optional[List[Any]] = None,
    name: str = "text_regressor",
    max_trials: int = 100,
    directory: Optional[str] = None,
    objective: str = "val_loss",
    overwrite: bool = True,
    seed: Optional[int] = None,
) -> AutokerasModel:
    """AutoKeras text regression model."""
    return construct(
        ModelType.TEXT_REGRESSOR,
        output_dim=as_integer(output_dim),
        loss=loss,
        metrics=metrics,
        project_name=name,
        max_trials=as_integer(max_trials),
        directory=directory or default_directory(),
        objective=objective,
        overwrite=overwrite,
        seed=as_integer(random_seed() if seed is None else seed),
    )


def model_text_classifier(
    num_classes: Optional[int] = None,
    multi_label: bool = False,
    loss: Any = None,
    metrics: Optional[List[Any]] = None,
    name: str = "text_classifier",
    max_trials: int = 100,
    directory: Optional[str] = None,
    objective: str = "val_loss",
    overwrite: bool = True,
    seed: Optional[int] = None,
) -> AutokerasModel:
    """
    AutoKeras text classification model.

    Args:
        num_classes: Number of classes. Inferred from the data when None
        multi_label: Whether the task is multi-label classification
        loss: Keras loss
        metrics: Keras metrics
        name: Project name
        max_trials: Maximum number of different models to try
        directory: Directory for storing the search outputs
        objective: Metric the search optimizes
        overwrite: Reload an existing project of the same name when False
        seed: Random seed

    Returns:
        A text classifier handle
    """
    return construct(
        ModelType.TEXT_CLASSIFIER,
        num_classes=as_integer(num_classes),
        multi_label=multi_label,
        loss=loss,
        metrics=metrics,
        project_name=name,
        max_trials=as_integer(max_trials),
        directory=directory or default_directory(),
        objective=objective,
        overwrite=overwrite,
        seed=as_integer(random_seed() if seed is None else seed),
    )
