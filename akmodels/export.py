"""
Export of the best model found by a search.
"""

import logging
from pathlib import Path
from typing import Any, Union

from .models.base import AutokerasModel, load_library

logger = logging.getLogger(__name__)


def export_model(handle: AutokerasModel) -> Any:
    """
    Export the best Keras model found by the search.

    Args:
        handle: Fitted model handle

    Returns:
        The best trained Keras model
    """
    return handle.model.export_model()


def save_model(handle: AutokerasModel, filepath: Union[str, Path]) -> Path:
    """
    Export the best model and save it to disk.

    Args:
        handle: Fitted model handle
        filepath: Destination of the saved model

    Returns:
        Path of the saved model
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    model = export_model(handle)
    model.save(str(filepath))

    logger.info(f"Best {handle.model_name.value} model saved to: {filepath}")
    return filepath


def load_model(filepath: Union[str, Path]) -> Any:
    """
    Load a model saved by ``save_model``.

    AutoKeras models contain custom preprocessing layers, so they are
    registered with Keras while loading.

    Args:
        filepath: Path of the saved model

    Returns:
        The loaded Keras model
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Saved model not found: {filepath}")

    from tensorflow import keras

    library = load_library()
    return keras.models.load_model(str(filepath), custom_objects=library.CUSTOM_OBJECTS)
