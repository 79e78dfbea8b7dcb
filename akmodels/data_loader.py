"""
Data loading for configuration-driven AutoKeras runs.

Loads the configured dataset and holds out a test split, returning inputs
in the shape each model family expects:

- structured data: pandas DataFrame of features and Series of targets
- text: numpy unicode array of texts and Series of targets
- image: numpy arrays loaded from ``.npy`` files
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from .config import Config
from .models.base import ModelType
from .utils import as_unicode_array

STRUCTURED_DATA_TYPES = {ModelType.STRUCTURED_DATA_REGRESSOR, ModelType.STRUCTURED_DATA_CLASSIFIER}
IMAGE_TYPES = {ModelType.IMAGE_REGRESSOR, ModelType.IMAGE_CLASSIFIER}
TEXT_TYPES = {ModelType.TEXT_REGRESSOR, ModelType.TEXT_CLASSIFIER}


class DataProcessor:
    """Main data processing class."""

    def __init__(self, config: Config):
        """
        Initialize data processor.

        Args:
            config: Configuration object
        """
        self.config = config
        self.model_type = config.model_type
        self.logger = logging.getLogger(__name__)

    def prepare_data(self) -> Dict[str, Any]:
        """
        Load the dataset and split it into train and test parts.

        Returns:
            Dictionary with x_train, y_train, x_test, y_test and a data summary
        """
        if self.model_type in IMAGE_TYPES:
            x_train, y_train, x_test, y_test = self._load_image_data()
        else:
            train_df, test_df = self._load_data()
            self._validate_data(train_df, test_df)
            x_train, y_train, x_test, y_test = self._split_frames(train_df, test_df)

        info = {
            'model_type': self.model_type.value,
            'train_samples': len(x_train),
            'test_samples': len(x_test),
            'total_samples': len(x_train) + len(x_test),
        }
        if self.model_type in STRUCTURED_DATA_TYPES:
            info['columns'] = [str(c) for c in x_train.columns]

        self.logger.info(
            f"Loaded {info['total_samples']} samples "
            f"({info['train_samples']} train, {info['test_samples']} test)"
        )

        return {
            'x_train': x_train,
            'y_train': y_train,
            'x_test': x_test,
            'y_test': y_test,
            'info': info,
        }

    def _load_data(self) -> Tuple[pd.DataFrame, Optional[pd.DataFrame]]:
        """Load train and, when configured, test CSV files."""
        train_path = Path(self.config.data['train_path'])
        if not train_path.exists():
            raise FileNotFoundError(f"Training data not found: {train_path}")
        train_df = pd.read_csv(train_path)

        test_df = None
        test_path = self.config.data.get('test_path')
        if test_path:
            test_path = Path(test_path)
            if not test_path.exists():
                raise FileNotFoundError(f"Test data not found: {test_path}")
            test_df = pd.read_csv(test_path)

        max_samples = self.config.data.get('max_samples')
        if max_samples is not None and max_samples < len(train_df):
            train_df = train_df.sample(
                n=int(max_samples),
                random_state=self.config.data.get('random_state', 42)
            ).reset_index(drop=True)

        return train_df, test_df

    def _validate_data(self, train_df: pd.DataFrame, test_df: Optional[pd.DataFrame]) -> None:
        """Validate that required columns exist."""
        target_col = self.config.data.get('target_column')
        if target_col is None:
            raise ValueError("Missing required configuration key: data.target_column")

        required = [target_col]
        if self.model_type in TEXT_TYPES:
            text_col = self.config.data.get('text_column')
            if text_col is None:
                raise ValueError("Missing required configuration key: data.text_column")
            required.append(text_col)

        for df_name, df in [('train', train_df), ('test', test_df)]:
            if df is None:
                continue
            for column in required:
                if column not in df.columns:
                    raise ValueError(f"Column '{column}' not found in {df_name} data")

    def _split_frames(
        self, train_df: pd.DataFrame, test_df: Optional[pd.DataFrame]
    ) -> Tuple[Any, pd.Series, Any, pd.Series]:
        """Hold out a test split unless a test file was given."""
        if test_df is None:
            target = train_df[self.config.data['target_column']]
            train_df, test_df = self._train_test_split(train_df, stratify_on=target)

        x_train, y_train = self._features_and_target(train_df)
        x_test, y_test = self._features_and_target(test_df)
        return x_train, y_train, x_test, y_test

    def _features_and_target(self, df: pd.DataFrame) -> Tuple[Any, pd.Series]:
        """Separate the inputs from the target column."""
        target_col = self.config.data['target_column']
        y = df[target_col].reset_index(drop=True)

        if self.model_type in TEXT_TYPES:
            x = as_unicode_array(df[self.config.data['text_column']].astype(str))
        else:
            x = df.drop(columns=[target_col]).reset_index(drop=True)
        return x, y

    def _load_image_data(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Load image arrays from .npy files."""
        x = self._load_array('x_path')
        y = self._load_array('y_path')
        if len(x) != len(y):
            raise ValueError(f"Image inputs and targets differ in length: {len(x)} != {len(y)}")

        if self.config.data.get('x_test_path'):
            x_test = self._load_array('x_test_path')
            y_test = self._load_array('y_test_path')
            return x, y, x_test, y_test

        x_train, x_test, y_train, y_test = self._train_test_split(x, y, stratify_on=y)
        return x_train, y_train, x_test, y_test

    def _load_array(self, key: str) -> np.ndarray:
        """Load a numpy array from the path configured under data.<key>."""
        path = self.config.data.get(key)
        if path is None:
            raise ValueError(f"Missing required configuration key: data.{key}")
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")
        return np.load(path)

    def _train_test_split(self, *arrays: Any, stratify_on: Any = None) -> list:
        """Split with the configured test size, stratified when data.stratify is set."""
        stratify = stratify_on if self.config.data.get('stratify', False) else None
        return train_test_split(
            *arrays,
            test_size=self.config.data.get('test_size', 0.2),
            random_state=self.config.data.get('random_state', 42),
            stratify=stratify
        )
