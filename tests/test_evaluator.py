"""predict/evaluate forward to the wrapped model."""

from __future__ import annotations

import numpy as np

from akmodels import evaluate, model_image_regressor, model_structured_data_regressor, predict


def test_predict_forwards_and_coerces_batch_size(fake_autokeras):
    handle = model_image_regressor()
    x = np.zeros((3, 4, 4))

    result = predict(handle, x, batch_size=8.0)

    name, kwargs = handle.model.calls[-1]
    assert name == "predict"
    assert kwargs["x"] is x
    assert kwargs["batch_size"] == 8
    assert type(kwargs["batch_size"]) is int
    assert result.shape == (3, 1)


def test_evaluate_forwards_csv_path_and_target_name(fake_autokeras):
    handle = model_structured_data_regressor()

    scores = evaluate(handle, "test.csv", "target")

    name, kwargs = handle.model.calls[-1]
    assert name == "evaluate"
    assert kwargs == {"x": "test.csv", "y": "target", "batch_size": 32}
    assert scores == [0.5, 0.75]


def test_handle_methods(fake_autokeras):
    handle = model_structured_data_regressor()

    handle.evaluate("test.csv", "target", verbose=0)
    assert handle.model.calls[-1][1]["verbose"] == 0

    handle.predict(["row"])
    assert handle.model.calls[-1][0] == "predict"
