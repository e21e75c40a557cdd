"""Ollama provider implementation."""

import requests
from pydantic import ValidationError

from ollacommit import config
from ollacommit.llm.base import BaseLLMProvider, GenerationRequest, GenerationResponse
from ollacommit.llm.exceptions import LLMError, ResponseDecodeError

CONTENT_TYPE = "application/json"


class OllamaProvider(BaseLLMProvider):
    """Local Ollama server reached through its /api/generate endpoint."""

    def __init__(
        self,
        model: str | None = None,
        max_tokens: int | None = None,
        top_p: int | None = None,
        temperature: int | None = None,
        repetition_penalty: int | None = None,
        url: str | None = None,
    ):
        """Initialize the Ollama provider.

        Unset arguments fall back to the active configuration.
        """
        self.model = model or config.ACTIVE_MODEL
        self.max_tokens = max_tokens if max_tokens is not None else config.MAX_TOKENS
        self.top_p = top_p if top_p is not None else config.TOP_P
        self.temperature = temperature if temperature is not None else config.TEMPERATURE
        self.repetition_penalty = (
            repetition_penalty if repetition_penalty is not None else config.REPETITION_PENALTY
        )
        self.url = url or config.ACTIVE_URL

    def build_request(self, prompt: str) -> GenerationRequest:
        return GenerationRequest(
            model=self.model,
            prompt=prompt,
            stream=False,
            max_tokens=self.max_tokens,
            top_p=self.top_p,
            temperature=self.temperature,
            repetition_penalty=self.repetition_penalty,
        )

    def generate(self, prompt: str) -> str:
        """Send one blocking generation request and return the text.

        The HTTP status is not inspected; any body that decodes is accepted.

        Raises:
            LLMError: If the server cannot be reached or reports an error.
            ResponseDecodeError: If the body is not the expected JSON.
        """
        body = self.build_request(prompt).model_dump()

        try:
            response = requests.post(
                self.url,
                json=body,
                headers={"Content-Type": CONTENT_TYPE},
            )
        except requests.exceptions.RequestException as e:
            raise LLMError(f"Ollama request to {self.url} failed: {e}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseDecodeError(f"Ollama returned a non-JSON body: {e}")

        try:
            result = GenerationResponse.model_validate(payload)
        except ValidationError as e:
            raise ResponseDecodeError(f"Ollama response does not match expected schema: {e}")

        if result.error:
            raise LLMError(f"Ollama reported an error: {result.error}")

        return result.response
