"""Configuration for ollacommit.

Configuration is loaded from ~/.ollacommit/config.yaml
Use 'ollacommit config' commands to modify settings.
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, ValidationError


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.ollacommit/config.yaml doesn't set them

DEFAULT_URL = "http://localhost:11434/api/generate"
DEFAULT_MODEL = "tinydolphin:1.1b-v2.8-q5_K_M"
DEFAULT_LANGUAGE = "english"
DEFAULT_TEMPLATE = ""
DEFAULT_EMOJI = True
DEFAULT_MAX_TOKENS = 2048
DEFAULT_TOP_P = 1
DEFAULT_TEMPERATURE = 1
DEFAULT_REPETITION_PENALTY = 1

# Environment variable overriding the inference endpoint
URL_ENV_VAR = "OLLACOMMIT_URL"


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_URL = DEFAULT_URL
ACTIVE_MODEL = DEFAULT_MODEL
ACTIVE_LANGUAGE = DEFAULT_LANGUAGE
ACTIVE_TEMPLATE = DEFAULT_TEMPLATE
ACTIVE_EMOJI = DEFAULT_EMOJI
MAX_TOKENS = DEFAULT_MAX_TOKENS
TOP_P = DEFAULT_TOP_P
TEMPERATURE = DEFAULT_TEMPERATURE
REPETITION_PENALTY = DEFAULT_REPETITION_PENALTY


class FileSettings(BaseModel):
    """Values accepted in ~/.ollacommit/config.yaml.

    Fields are strict so a quoted "false" or a non-numeric limit is reported
    instead of being coerced. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    model: Optional[StrictStr] = None
    language: Optional[StrictStr] = None
    template: Optional[StrictStr] = None
    emoji: StrictBool = DEFAULT_EMOJI
    max_tokens: StrictInt = DEFAULT_MAX_TOKENS
    top_p: StrictInt = DEFAULT_TOP_P
    temperature: StrictInt = DEFAULT_TEMPERATURE
    repetition_penalty: StrictInt = DEFAULT_REPETITION_PENALTY
    url: Optional[StrictStr] = None


def load_config() -> None:
    """Load configuration from the global config file and environment.

    This should be called by the CLI before building run options.

    Raises:
        GlobalConfigError: If the config file cannot be read or holds invalid values.
    """
    global ACTIVE_URL, ACTIVE_MODEL, ACTIVE_LANGUAGE, ACTIVE_TEMPLATE, ACTIVE_EMOJI
    global MAX_TOKENS, TOP_P, TEMPERATURE, REPETITION_PENALTY

    # Import here to avoid circular dependency
    from ollacommit import global_config

    try:
        settings = FileSettings.model_validate(global_config.load_global_config())
    except ValidationError as e:
        raise global_config.GlobalConfigError(
            f"Invalid value in {global_config.get_config_file_path()}: {e}"
        )

    ACTIVE_MODEL = settings.model or DEFAULT_MODEL
    ACTIVE_LANGUAGE = settings.language or DEFAULT_LANGUAGE
    ACTIVE_TEMPLATE = settings.template or DEFAULT_TEMPLATE
    ACTIVE_EMOJI = settings.emoji
    MAX_TOKENS = settings.max_tokens
    TOP_P = settings.top_p
    TEMPERATURE = settings.temperature
    REPETITION_PENALTY = settings.repetition_penalty

    # Environment wins over the config file for the endpoint
    ACTIVE_URL = os.getenv(URL_ENV_VAR) or settings.url or DEFAULT_URL
