"""Global configuration management for ollacommit.

Handles user-level configuration stored in ~/.ollacommit/config.yaml:
model, language, template, emoji toggle, sampling limits and endpoint URL.
"""

from pathlib import Path
from typing import Any, Dict

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".ollacommit"

# Keys accepted in config.yaml
CONFIG_KEYS = (
    "model",
    "language",
    "template",
    "emoji",
    "max_tokens",
    "top_p",
    "temperature",
    "repetition_penalty",
    "url",
)


def get_global_config_dir() -> Path:
    """Get the global ollacommit configuration directory.

    Returns:
        Path to ~/.ollacommit/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.ollacommit/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.ollacommit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.ollacommit/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def set_value(key: str, value: Any) -> None:
    """Set a single value in global config.

    Args:
        key: One of CONFIG_KEYS.
        value: The value to store.

    Raises:
        GlobalConfigError: If the key is unknown or the file cannot be written.
    """
    if key not in CONFIG_KEYS:
        raise GlobalConfigError(f"Unknown config key: {key}")
    config = load_global_config()
    config[key] = value
    save_global_config(config)


def is_configured() -> bool:
    """Check if ollacommit has a config file.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
