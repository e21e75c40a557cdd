"""Prompt size and fee estimation.

The fee is a flat approximation of paid-API pricing shown as an advisory;
the local backend does not bill anything.
"""

from dataclasses import dataclass

FEE_PER_1K_TOKENS = 0.02
FEE_PER_COMPLETION = 0.001


@dataclass
class PromptEstimate:
    """Estimated size and cost of sending a prompt."""

    tokens: int
    fee: float
    too_large: bool


def estimate_tokens(prompt: str) -> int:
    """Count whitespace-delimited words as a token proxy."""
    return len(prompt.split())


def estimate_fee(tokens: int, num_completions: int) -> float:
    """Approximate fee in dollars for a prompt and a number of completions."""
    return tokens / 1000 * FEE_PER_1K_TOKENS + FEE_PER_COMPLETION * num_completions


def estimate_prompt(prompt: str, num_completions: int, max_tokens: int) -> PromptEstimate:
    """Estimate a prompt and decide whether it exceeds the token ceiling.

    Args:
        prompt: The prompt to be sent.
        num_completions: Number of completions requested from the model.
        max_tokens: Ceiling above which the prompt is refused.

    Returns:
        A PromptEstimate; too_large is True iff tokens > max_tokens.
    """
    tokens = estimate_tokens(prompt)
    return PromptEstimate(
        tokens=tokens,
        fee=estimate_fee(tokens, num_completions),
        too_large=tokens > max_tokens,
    )
