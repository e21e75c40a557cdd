"""Run options resolved once at startup."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ollacommit import config


class RunOptions(BaseModel):
    """Immutable set of options for a single ollacommit run.

    Attributes:
        model: Ollama model name.
        language: Language the commit message is written in.
        template: Optional template containing {COMMIT_MESSAGE} / {GIT_BRANCH}.
        emoji: Prefix a gitmoji matching the commit type.
        commit_type: Commit type the model is told to use, if any.
        list_mode: Offer several candidates instead of one.
        force: Commit without asking for confirmation.
        filter_fee: Show the approximate fee and ask before generating.
        max_tokens: Prompt size ceiling, also sent as the generation limit.
        top_p: Sampling top-p.
        temperature: Sampling temperature.
        repetition_penalty: Sampling repetition penalty.
        filter_files: Optional pathspec limiting the staged diff.
        url: Generation endpoint.
    """

    model_config = ConfigDict(frozen=True)

    model: str = config.DEFAULT_MODEL
    language: str = config.DEFAULT_LANGUAGE
    template: str = config.DEFAULT_TEMPLATE
    emoji: bool = config.DEFAULT_EMOJI
    commit_type: Optional[str] = None
    list_mode: bool = False
    force: bool = False
    filter_fee: bool = False
    max_tokens: int = config.DEFAULT_MAX_TOKENS
    top_p: int = config.DEFAULT_TOP_P
    temperature: int = config.DEFAULT_TEMPERATURE
    repetition_penalty: int = config.DEFAULT_REPETITION_PENALTY
    filter_files: Optional[str] = None
    url: str = config.DEFAULT_URL

    @field_validator("commit_type", "filter_files")
    @classmethod
    def empty_means_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty strings as not provided."""
        if v is None or not v.strip():
            return None
        return v.strip()


def resolve_options(**overrides) -> RunOptions:
    """Merge CLI overrides onto the active configuration.

    Overrides set to None fall back to the values loaded by config.load_config().

    Returns:
        The resolved RunOptions.
    """
    values = {
        "model": config.ACTIVE_MODEL,
        "language": config.ACTIVE_LANGUAGE,
        "template": config.ACTIVE_TEMPLATE,
        "emoji": config.ACTIVE_EMOJI,
        "max_tokens": config.MAX_TOKENS,
        "top_p": config.TOP_P,
        "temperature": config.TEMPERATURE,
        "repetition_penalty": config.REPETITION_PENALTY,
        "url": config.ACTIVE_URL,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    return RunOptions(**values)
