"""LLM-related exception classes.

Contains all exception classes for inference operations:
- LLMError: Base exception for LLM-related errors
- ResponseDecodeError: Raised when the server reply is not the expected JSON
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class ResponseDecodeError(LLMError):
    """Raised when the inference server response cannot be decoded."""

    pass
