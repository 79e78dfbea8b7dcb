"""
Search entry point for AutoKeras model handles.

``fit`` searches for the best model and hyperparameters based on the
performance on validation data. The search itself, including early stopping
and trial scheduling, runs inside AutoKeras; this module only adapts the
arguments before forwarding them.
"""

import logging
from typing import Any, List, Optional

from .models.base import AutokerasModel
from .utils import as_integer, as_unicode_array

logger = logging.getLogger(__name__)


def _encode_validation_data(validation_data: Any) -> Any:
    """
    Convert the inputs of an ``(x, y)`` validation pair to a unicode array.

    Datasets, generators and anything other than a two-item list or tuple
    are passed through unchanged.
    """
    if not isinstance(validation_data, (list, tuple)) or len(validation_data) != 2:
        return validation_data
    x_val, y_val = validation_data
    return (as_unicode_array(x_val), y_val)


def fit(
    handle: AutokerasModel,
    x: Any = None,
    y: Any = None,
    epochs: int = 1000,
    callbacks: Optional[List[Any]] = None,
    validation_split: float = 0.2,
    validation_data: Any = None,
    **kwargs: Any
) -> AutokerasModel:
    """
    Search for the best model and hyperparameters.

    Args:
        handle: Model handle returned by one of the ``model_*`` constructors
        x: Training inputs. A CSV path for structured data read from disk
        y: Training targets. The target column name when x is a CSV path
        epochs: Maximum number of epochs to train each model during the
            search. Training stops early once the validation loss stops
            improving for 10 epochs unless an EarlyStopping callback is given
        callbacks: Keras callbacks applied during training and validation
        validation_split: Fraction of the training data held out for
            validation. Ignored when ``validation_data`` is given
        validation_data: ``(x, y)`` pair evaluated at the end of each epoch.
            Overrides ``validation_split``
        **kwargs: Forwarded to the wrapped ``fit``

    Returns:
        The same handle, now holding the best model found
    """
    if handle.is_text:
        x = as_unicode_array(x)
        validation_data = _encode_validation_data(validation_data)

    epochs = as_integer(epochs)
    logger.info(f"Fitting {handle.model_name.value} for up to {epochs} epochs per trial")

    handle.model.fit(
        x=x,
        y=y,
        epochs=epochs,
        callbacks=callbacks,
        validation_split=validation_split,
        validation_data=validation_data,
        **kwargs
    )
    return handle
