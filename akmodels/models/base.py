"""
Handle type shared by every AutoKeras model constructor.

This module defines the model-type tags, the lazy loader for the wrapped
library and the ``AutokerasModel`` handle that the constructors return and
the ``fit``/``predict``/``evaluate``/``export_model`` verbs operate on.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ModelType(str, Enum):
    """Fixed enumeration of the model variants exposed by this package."""

    STRUCTURED_DATA_REGRESSOR = "structured_data_regressor"
    STRUCTURED_DATA_CLASSIFIER = "structured_data_classifier"
    IMAGE_REGRESSOR = "image_regressor"
    IMAGE_CLASSIFIER = "image_classifier"
    TEXT_REGRESSOR = "text_regressor"
    TEXT_CLASSIFIER = "text_classifier"


# Class name of each variant inside the autokeras namespace
AUTOKERAS_CLASSES: Dict[ModelType, str] = {
    ModelType.STRUCTURED_DATA_REGRESSOR: "StructuredDataRegressor",
    ModelType.STRUCTURED_DATA_CLASSIFIER: "StructuredDataClassifier",
    ModelType.IMAGE_REGRESSOR: "ImageRegressor",
    ModelType.IMAGE_CLASSIFIER: "ImageClassifier",
    ModelType.TEXT_REGRESSOR: "TextRegressor",
    ModelType.TEXT_CLASSIFIER: "TextClassifier",
}

TEXT_MODEL_TYPES = frozenset({ModelType.TEXT_REGRESSOR, ModelType.TEXT_CLASSIFIER})


def load_library():
    """
    Import and return the wrapped ``autokeras`` module.

    The import is deferred so that importing this package does not pull in
    TensorFlow until a model is actually built.
    """
    import autokeras

    return autokeras


def construct(model_type: ModelType, **kwargs: Any) -> "AutokerasModel":
    """
    Instantiate the wrapped class for ``model_type`` and wrap it in a handle.

    Args:
        model_type: Model-type tag
        **kwargs: Constructor arguments, forwarded unchanged

    Returns:
        New handle around the constructed instance
    """
    model_type = ModelType(model_type)
    library = load_library()
    model_class = getattr(library, AUTOKERAS_CLASSES[model_type])
    return AutokerasModel(model_type, model_class(**kwargs))


class AutokerasModel:
    """
    Handle around a constructed AutoKeras model.

    The handle is mutated in place by ``fit``; callers do not need to
    reassign the value returned by the verbs.
    """

    def __init__(self, model_name: ModelType, model: Any):
        """
        Args:
            model_name: Model-type tag
            model: Wrapped AutoKeras instance
        """
        self.model_name = ModelType(model_name)
        self.model = model

    @property
    def is_text(self) -> bool:
        """Whether the handle wraps one of the text models."""
        return self.model_name in TEXT_MODEL_TYPES

    def fit(self, x: Any = None, y: Any = None, **kwargs: Any) -> "AutokerasModel":
        """Search for the best model. See :func:`akmodels.trainer.fit`."""
        from ..trainer import fit

        return fit(self, x, y, **kwargs)

    def predict(self, x: Any, batch_size: int = 32, **kwargs: Any) -> Any:
        """Predict with the best model. See :func:`akmodels.evaluator.predict`."""
        from ..evaluator import predict

        return predict(self, x, batch_size=batch_size, **kwargs)

    def evaluate(self, x: Any, y: Optional[Any] = None, batch_size: int = 32, **kwargs: Any) -> Any:
        """Evaluate the best model. See :func:`akmodels.evaluator.evaluate`."""
        from ..evaluator import evaluate

        return evaluate(self, x, y, batch_size=batch_size, **kwargs)

    def export_model(self) -> Any:
        """Return the best Keras model found by the search."""
        from ..export import export_model

        return export_model(self)

    def __repr__(self) -> str:
        return f"AutokerasModel(model_name={self.model_name.value}, model={type(self.model).__name__})"
