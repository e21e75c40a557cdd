"""Base classes and wire models for inference providers."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class GenerationRequest(BaseModel):
    """JSON body of a single, non-streamed generation request."""

    model: str
    prompt: str
    stream: bool = False
    max_tokens: int
    top_p: int
    temperature: int
    repetition_penalty: int


class GenerationResponse(BaseModel):
    """JSON body returned by the generation endpoint.

    Attributes:
        response: The generated text. Missing in the body means empty.
        error: Set by the server instead of `response` when generation fails.
    """

    response: str = ""
    error: Optional[str] = None


class BaseLLMProvider(ABC):
    """Abstract base class for commit message generators."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Generate text for a fully built prompt.

        Args:
            prompt: The instruction string including the diff.

        Returns:
            The raw text produced by the model.

        Raises:
            LLMError: For transport or decoding failures.
        """
        pass
