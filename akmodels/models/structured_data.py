"""
Structured data (tabular) model constructors.

To ``fit``, ``evaluate`` or ``predict``, format inputs as:

- x: path to a CSV file, a pandas DataFrame or a 2D numpy array. When the
  data comes from a CSV file, x is the path of the file.
- y: the name of the target column when x is a CSV path, otherwise a
  single- or multi-column array-like.

The returned handle is modified in place by the verbs, so reassigning the
result of ``fit`` is optional.
"""

from typing import Any, Dict, List, Optional

from ..utils import as_integer, default_directory, random_seed
from .base import AutokerasModel, ModelType, construct


def model_structured_data_regressor(
    column_names: Optional[List[str]] = None,
    column_types: Optional[Dict[str, str]] = None,
    output_dim: Optional[int] = None,
    loss: Any = "mean_squared_error",
    metrics: Optional[List[Any]] = None,
    name: str = "structured_data_regressor",
    max_trials: int = 100,
    directory: Optional[str] = None,
    objective: str = "val_loss",
    overwrite: bool = True,
    seed: Optional[int] = None,
) -> AutokerasModel:
    """
    AutoKeras structured data regression model.

    Args:
        column_names: Names of the columns, excluding the target column.
            Inferred from the CSV header when None
        column_types: Mapping of column name to ``"categorical"`` or
            ``"numerical"``. Inferred from the data when None
        output_dim: Number of output dimensions. Inferred from the data when None
        loss: Keras loss
        metrics: Keras metrics
        name: Project name, used as the sub-directory of ``directory``
        max_trials: Maximum number of different models to try
        directory: Directory for storing the search outputs (fresh temp dir if None)
        objective: Metric the search optimizes
        overwrite: Reload an existing project of the same name when False
        seed: Random seed (drawn at random if None)

    Returns:
        A structured data regressor handle
    """
    return construct(
        ModelType.STRUCTURED_DATA_REGRESSOR,
        column_names=column_names,
        column_types=column_types,
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


def model_structured_data_classifier(
    column_names: Optional[List[str]] = None,
    column_types: Optional[Dict[str, str]] = None,
    num_classes: Optional[int] = None,
    multi_label: bool = False,
    loss: Any = None,
    metrics: Optional[List[Any]] = None,
    name: str = "structured_data_classifier",
    max_trials: int = 100,
    directory: Optional[str] = None,
    objective: str = "val_accuracy",
    overwrite: bool = True,
    seed: Optional[int] = None,
) -> AutokerasModel:
    """
    AutoKeras structured data classification model.

    Args:
        column_names: Names of the columns, excluding the target column
        column_types: Mapping of column name to ``"categorical"`` or ``"numerical"``
        num_classes: Number of classes. Inferred from the data when None
        multi_label: Whether the task is multi-label classification
        loss: Keras loss; binary or categorical crossentropy is picked
            from the number of classes when None
        metrics: Keras metrics
        name: Project name
        max_trials: Maximum number of different models to try
        directory: Directory for storing the search outputs
        objective: Metric the search optimizes
        overwrite: Reload an existing project of the same name when False
        seed: Random seed

    Returns:
        A structured data classifier handle
    """
    return construct(
        ModelType.STRUCTURED_DATA_CLASSIFIER,
        column_names=column_names,
        column_types=column_types,
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
