"""Constructors: wrapped class selection, defaults and integer coercion."""

from __future__ import annotations

import pytest

from akmodels import (
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


def _assert_int(value):
    assert type(value) is int


@pytest.mark.parametrize(
    "constructor, model_type, class_name",
    [
        (model_structured_data_regressor, ModelType.STRUCTURED_DATA_REGRESSOR, "StructuredDataRegressor"),
        (model_structured_data_classifier, ModelType.STRUCTURED_DATA_CLASSIFIER, "StructuredDataClassifier"),
        (model_image_regressor, ModelType.IMAGE_REGRESSOR, "ImageRegressor"),
        (model_image_classifier, ModelType.IMAGE_CLASSIFIER, "ImageClassifier"),
        (model_text_regressor, ModelType.TEXT_REGRESSOR, "TextRegressor"),
        (model_text_classifier, ModelType.TEXT_CLASSIFIER, "TextClassifier"),
    ],
)
def test_constructor_wraps_matching_class(fake_autokeras, constructor, model_type, class_name):
    handle = constructor()

    assert isinstance(handle, AutokerasModel)
    assert handle.model_name is model_type
    assert type(handle.model).__name__ == class_name

    kwargs = handle.model.init_kwargs
    assert kwargs["project_name"] == model_type.value
    assert kwargs["max_trials"] == 100
    assert kwargs["overwrite"] is True
    assert kwargs["directory"]
    _assert_int(kwargs["seed"])
    assert 0 <= kwargs["seed"] < 10e6


def test_structured_regressor_coerces_numeric_arguments(fake_autokeras):
    handle = model_structured_data_regressor(
        column_names=["a", "b"],
        column_types={"a": "numerical", "b": "categorical"},
        output_dim=2.0,
        max_trials=3.0,
        seed=7.0,
        directory="/tmp/search",
        name="house_prices",
    )
    kwargs = handle.model.init_kwargs

    assert kwargs["output_dim"] == 2
    _assert_int(kwargs["output_dim"])
    assert kwargs["max_trials"] == 3
    _assert_int(kwargs["max_trials"])
    assert kwargs["seed"] == 7
    _assert_int(kwargs["seed"])
    assert kwargs["column_names"] == ["a", "b"]
    assert kwargs["column_types"] == {"a": "numerical", "b": "categorical"}
    assert kwargs["directory"] == "/tmp/search"
    assert kwargs["project_name"] == "house_prices"
    assert kwargs["loss"] == "mean_squared_error"
    assert kwargs["objective"] == "val_loss"


def test_output_dim_stays_none_when_unset(fake_autokeras):
    handle = model_image_regressor()
    assert handle.model.init_kwargs["output_dim"] is None


def test_classifier_defaults_and_num_classes_coercion(fake_autokeras):
    handle = model_structured_data_classifier(num_classes=3.0, multi_label=True)
    kwargs = handle.model.init_kwargs

    assert kwargs["num_classes"] == 3
    _assert_int(kwargs["num_classes"])
    assert kwargs["multi_label"] is True
    assert kwargs["loss"] is None
    assert kwargs["objective"] == "val_accuracy"

    text_kwargs = model_text_classifier().model.init_kwargs
    assert text_kwargs["num_classes"] is None
    assert text_kwargs["objective"] == "val_loss"


def test_random_seed_drawn_per_handle(fake_autokeras):
    seeds = {model_image_classifier().model.init_kwargs["seed"] for _ in range(5)}
    assert len(seeds) > 1


def test_build_model_dispatches_on_tag(fake_autokeras):
    handle = build_model("text_regressor", max_trials=2.0)

    assert handle.model_name is ModelType.TEXT_REGRESSOR
    assert handle.model.init_kwargs["max_trials"] == 2


def test_build_model_rejects_unknown_tag(fake_autokeras):
    with pytest.raises(ValueError, match="Unknown model type"):
        build_model("timeseries_forecaster")


def test_handle_reports_text_models(fake_autokeras):
    assert model_text_classifier().is_text
    assert model_text_regressor().is_text
    assert not model_image_classifier().is_text

    assert "text_classifier" in repr(model_text_classifier())
