"""
AutoKeras model constructors.

Contains one constructor per model variant:
- model_structured_data_regressor / model_structured_data_classifier
- model_image_regressor / model_image_classifier
- model_text_regressor / model_text_classifier
"""

from typing import Any

from .base import AutokerasModel, ModelType, TEXT_MODEL_TYPES
from .image import model_image_classifier, model_image_regressor
from .structured_data import model_structured_data_classifier, model_structured_data_regressor
from .text import model_text_classifier, model_text_regressor

CONSTRUCTORS = {
    ModelType.STRUCTURED_DATA_REGRESSOR: model_structured_data_regressor,
    ModelType.STRUCTURED_DATA_CLASSIFIER: model_structured_data_classifier,
    ModelType.IMAGE_REGRESSOR: model_image_regressor,
    ModelType.IMAGE_CLASSIFIER: model_image_classifier,
    ModelType.TEXT_REGRESSOR: model_text_regressor,
    ModelType.TEXT_CLASSIFIER: model_text_classifier,
}


def build_model(model_type: str, **kwargs: Any) -> AutokerasModel:
    """
    Build a handle from its model-type tag.

    Args:
        model_type: One of the ``ModelType`` values (e.g. 'text_classifier')
        **kwargs: Arguments for the matching ``model_*`` constructor

    Returns:
        New handle
    """
    try:
        model_type = ModelType(model_type)
    except ValueError:
        known = ", ".join(t.value for t in ModelType)
        raise ValueError(f"Unknown model type: {model_type}. Expected one of: {known}")
    return CONSTRUCTORS[model_type](**kwargs)


__all__ = [
    "AutokerasModel",
    "ModelType",
    "TEXT_MODEL_TYPES",
    "CONSTRUCTORS",
    "build_model",
    "model_structured_data_regressor",
    "model_structured_data_classifier",
    "model_image_regressor",
    "model_image_classifier",
    "model_text_regressor",
    "model_text_classifier",
]
