"""
Configuration loader and validator for configuration-driven AutoKeras runs.

Simple configuration management that loads YAML files and provides
easy access to configuration parameters.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .models.base import ModelType


class Config:
    """
    Simple configuration class that loads and validates YAML config files.
    """

    def __init__(self, config_path: Union[str, Path]):
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        self._config = self._load_config()
        self._validate_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file must contain a mapping: {self.config_path}")
        return config

    def _validate_config(self) -> None:
        """Validate required sections and the model type."""
        required_sections = ['model', 'data', 'fit', 'output']

        for section in required_sections:
            if section not in self._config:
                raise ValueError(f"Missing required configuration section: {section}")

        model_type = self.get('model.type')
        if model_type is None:
            raise ValueError("Missing required configuration key: model.type")
        try:
            ModelType(model_type)
        except ValueError:
            known = ", ".join(t.value for t in ModelType)
            raise ValueError(f"Unknown model type in configuration: {model_type}. Expected one of: {known}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'data.train_path')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'model.max_trials')
            value: Value to set
        """
        keys = key.split('.')
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    @property
    def model_type(self) -> ModelType:
        """Get the configured model-type tag."""
        return ModelType(self._config['model']['type'])

    @property
    def model(self) -> Dict[str, Any]:
        """Get model configuration."""
        return self._config['model']

    @property
    def model_kwargs(self) -> Dict[str, Any]:
        """Get constructor arguments (model section without the type key)."""
        return {k: v for k, v in self._config['model'].items() if k != 'type'}

    @property
    def data(self) -> Dict[str, Any]:
        """Get data configuration."""
        return self._config['data']

    @property
    def fit(self) -> Dict[str, Any]:
        """Get fit configuration."""
        return self._config['fit'] or {}

    @property
    def predict(self) -> Dict[str, Any]:
        """Get predict/evaluate configuration."""
        return self._config.get('predict') or {}

    @property
    def output(self) -> Dict[str, Any]:
        """Get output configuration."""
        return self._config['output']

    def save(self, save_path: Union[str, Path]) -> None:
        """
        Save current configuration to YAML file.

        Args:
            save_path: Path to save the configuration
        """
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)

        with open(save_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self._config, f, indent=2, default_flow_style=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary."""
        return self._config.copy()

    def __str__(self) -> str:
        return f"Config(path={self.config_path}, sections={list(self._config.keys())})"

    def __repr__(self) -> str:
        return self.__str__()


def load_config(config_path: Union[str, Path]) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Config object
    """
    return Config(config_path)
