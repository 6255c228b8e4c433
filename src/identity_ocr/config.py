"""
Configuration management for the OCR client.

Configuration is supplied once at construction time, either directly as an
OCRConfig, from a dictionary, or from a JSON file.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .models import MessageType, Topic


DEFAULT_MAX_TOKENS = 1024
DEFAULT_MODEL = "gpt-4o"


@dataclass(frozen=True)
class OCRConfig:
    """Completion and publish settings for OCRClient."""
    max_tokens: int = DEFAULT_MAX_TOKENS
    model: str = DEFAULT_MODEL
    topic: Topic = Topic.DEV
    message_type: MessageType = MessageType.IDENTIFY_OCR

    def __post_init__(self):
        """Validate values and coerce enum strings."""
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int):
            raise ValueError("max_tokens must be an integer")
        if self.max_tokens <= 0:
            raise ValueError("max_tokens must be positive")
        if not self.model or not isinstance(self.model, str):
            raise ValueError("model must be a non-empty string")
        try:
            object.__setattr__(self, "topic", _as_topic(self.topic))
            object.__setattr__(self, "message_type", MessageType(self.message_type))
        except ValueError as e:
            raise ValueError(f"Invalid configuration value: {e}") from e

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "OCRConfig":
        """Create OCRConfig from a dictionary; missing keys take defaults."""
        known = {"max_tokens", "model", "topic", "message_type"}
        unknown = set(config_dict) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**config_dict)


def _as_topic(value: Union[Topic, str]) -> Topic:
    """Accept either the topic value ("wanderer-dev") or its name ("dev")."""
    if isinstance(value, str) and value.upper() in Topic.__members__:
        return Topic[value.upper()]
    return Topic(value)


def default_config() -> OCRConfig:
    """1024 max tokens, gpt-4o, dev topic, identify_ocr events."""
    return OCRConfig()


def load_config(config_path: Union[str, Path]) -> OCRConfig:
    """
    Load OCR configuration from a JSON file.

    Args:
        config_path: Path to a JSON object with any of max_tokens, model,
                     topic and message_type

    Returns:
        Validated OCRConfig instance

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the file is not valid JSON or validation fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_dict = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in configuration file: {e.msg}") from e

    if not isinstance(config_dict, dict):
        raise ValueError("Configuration file must contain a JSON object")

    try:
        return OCRConfig.from_dict(config_dict)
    except TypeError as e:
        raise ValueError(f"Invalid configuration value type: {e}") from e


def resolve_config(config: Optional[OCRConfig]) -> OCRConfig:
    return config if config is not None else default_config()
