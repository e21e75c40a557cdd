"""Prompt templates for commit message generation."""

from typing import Optional

DIFF_START = "START OF GIT DIFF:\n"
DIFF_END = "\nEND OF GIT DIFF"

CONVENTIONAL_FORMAT = (
    "and use the conventional commits specification (<type in lowercase>: <subject>): "
)


def _intro(language: str) -> str:
    return "From the following git diff create a short, useful git commit message in " + language + " language"


def build_single_prompt(diff: str, commit_type: Optional[str], language: str) -> str:
    """Build the prompt asking for exactly one commit message.

    Args:
        diff: Filtered diff text.
        commit_type: Optional commit type the model must use (e.g. "fix").
        language: Language to write the message in.

    Returns:
        The prompt string.
    """
    prompt = _intro(language)

    if commit_type:
        prompt += " with commit type '" + commit_type + "'. "
    else:
        prompt += ". "

    prompt += (
        "Do not preface the commit with anything, use the present tense, return the full sentence, "
        + CONVENTIONAL_FORMAT
        + DIFF_START
        + diff
        + DIFF_END
    )
    return prompt


def build_list_prompt(diff: str, commit_type: Optional[str], language: str, num_options: int) -> str:
    """Build the prompt asking for several ';'-separated commit messages.

    Args:
        diff: Filtered diff text.
        commit_type: Optional commit type the model must use.
        language: Language to write the messages in.
        num_options: Number of alternatives to request.

    Returns:
        The prompt string.
    """
    prompt = _intro(language)

    if commit_type:
        prompt += " with commit type '" + commit_type + "', "
    else:
        prompt += ", "

    prompt += (
        f"and make {num_options} options that are separated by ';'. "
        "For each option, use the present tense, return the full sentence, "
        + CONVENTIONAL_FORMAT
        + DIFF_START
        + diff
        + DIFF_END
    )
    return prompt
