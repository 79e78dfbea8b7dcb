"""
Prediction and evaluation with the best model of a fitted handle.
"""

import logging
from typing import Any, Optional

from .models.base import AutokerasModel
from .utils import as_integer

logger = logging.getLogger(__name__)


def predict(handle: AutokerasModel, x: Any, batch_size: int = 32, **kwargs: Any) -> Any:
    """
    Predict with the best model found by ``fit``.

    Args:
        handle: Fitted model handle
        x: Inputs, formatted as for ``fit``
        batch_size: Number of samples per batch
        **kwargs: Forwarded to the wrapped ``predict``

    Returns:
        Predictions as returned by AutoKeras
    """
    logger.debug(f"Predicting with {handle.model_name.value}")
    return handle.model.predict(x=x, batch_size=as_integer(batch_size), **kwargs)


def evaluate(
    handle: AutokerasModel,
    x: Any,
    y: Optional[Any] = None,
    batch_size: int = 32,
    **kwargs: Any
) -> Any:
    """
    Evaluate the best model on the given data.

    Args:
        handle: Fitted model handle
        x: Inputs, formatted as for ``fit``
        y: Targets, or the target column name when x is a CSV path
        batch_size: Number of samples per batch
        **kwargs: Forwarded to the wrapped ``evaluate``

    Returns:
        Scalar loss or list of loss and metric values
    """
    logger.debug(f"Evaluating {handle.model_name.value}")
    return handle.model.evaluate(x=x, y=y, batch_size=as_integer(batch_size), **kwargs)
