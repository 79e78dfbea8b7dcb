"""
Image model constructors.

x is a numpy array of images with shape ``(samples, height, width)`` or
``(samples, height, width, channels)``; y holds one label or target row per
image.
"""

from typing import Any, List, Optional

from ..utils import as_integer, default_directory, random_seed
from .base import AutokerasModel, ModelType, construct


def model_image_regressor(
    output_dim: Optional[int] = None,
    loss: Any = "mean_squared_error",
    metrics: Optional[List[Any]] = None,
    name: str = "image_regressor",
    max_trials: int = 100,
    directory: Optional[str] = None,
    objective: str = "val_loss",
    overwrite: bool = True,
    seed: Optional[int] = None,
) -> AutokerasModel:
    """AutoKeras image regression model."""
    return construct(
        ModelType.IMAGE_REGRESSOR,
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


def model_image_classifier(
    num_classes: Optional[int] = None,
    multi_label: bool = False,
    loss: Any = None,
    metrics: Optional[List[Any]] = None,
    name: str = "image_classifier",
    max_trials: int = 100,
    directory: Optional[str] = None,
    objective: str = "val_loss",
    overwrite: bool = True,
    seed: Optional[int] = None,
) -> AutokerasModel:
    """
    AutoKeras image classification model.

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
        An image classifier handle
    """
    return construct(
        ModelType.IMAGE_CLASSIFIER,
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
