"""Inference module for ollacommit.

This module exposes the generator interface and the Ollama implementation.
"""

from dotenv import load_dotenv

from ollacommit.llm.base import (
    BaseLLMProvider,
    GenerationRequest,
    GenerationResponse,
)
from ollacommit.llm.exceptions import LLMError, ResponseDecodeError
from ollacommit.llm.ollama_provider import OllamaProvider
from ollacommit.llm.prompts import build_list_prompt, build_single_prompt

# Load environment variables from .env file
load_dotenv()


def get_provider(options) -> BaseLLMProvider:
    """Build the provider described by the run options.

    Args:
        options: A RunOptions instance.

    Returns:
        An OllamaProvider configured with the model, sampling limits and URL.
    """
    return OllamaProvider(
        model=options.model,
        max_tokens=options.max_tokens,
        top_p=options.top_p,
        temperature=options.temperature,
        repetition_penalty=options.repetition_penalty,
        url=options.url,
    )


__all__ = [
    "BaseLLMProvider",
    "GenerationRequest",
    "GenerationResponse",
    "LLMError",
    "ResponseDecodeError",
    "OllamaProvider",
    "build_list_prompt",
    "build_single_prompt",
    "get_provider",
]
