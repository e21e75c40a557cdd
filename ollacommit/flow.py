"""Interactive commit flows.

Single mode proposes one message and commits it after confirmation (or
immediately with --force). List mode offers several candidates plus a
regenerate entry and loops until a candidate is picked.
"""

import typer

from ollacommit.cost import estimate_prompt
from ollacommit.formatters import REGENERATE_OPTION, postprocess, split_options
from ollacommit.git.base import Committer
from ollacommit.llm.base import BaseLLMProvider
from ollacommit.llm.prompts import build_list_prompt, build_single_prompt
from ollacommit.options import RunOptions

LIST_OPTIONS_COUNT = 5

RULE = "-" * 30


class CommitAborted(Exception):
    """Raised when the run stops on a user decision or refused prompt."""

    pass


def _ask(question: str) -> str:
    """Read one line of input; an empty answer is allowed."""
    return typer.prompt(question, default="", show_default=False).strip()


def check_prompt(prompt: str, num_completions: int, options: RunOptions) -> None:
    """Refuse oversized prompts and, if requested, confirm the estimated fee.

    Raises:
        CommitAborted: If the prompt is too large or the user declines the fee.
    """
    estimate = estimate_prompt(prompt, num_completions, options.max_tokens)

    if estimate.too_large:
        raise CommitAborted(
            f"The commit diff is too large. Max {options.max_tokens} tokens allowed."
        )

    if options.filter_fee:
        typer.echo(f"This will cost you ~${estimate.fee:.3f} for using the API.")
        if _ask("Do you want to continue 💸? (y/n)").lower() != "y":
            raise CommitAborted("Generation cancelled by user 🙅‍♂️")


def _display_proposal(message: str, templated: bool) -> None:
    header = "Proposed Commit With Template:" if templated else "Proposed Commit:"
    typer.echo(header)
    typer.echo(RULE)
    typer.echo(message)
    typer.echo(RULE)


def run_single(
    diff: str,
    options: RunOptions,
    generator: BaseLLMProvider,
    committer: Committer,
) -> str:
    """Generate one message, show it, and commit it once confirmed.

    Args:
        diff: Filtered diff text.
        options: Resolved run options.
        generator: Produces model text for a prompt.
        committer: Records the final commit.

    Returns:
        The committed message.

    Raises:
        CommitAborted: If the prompt is refused or the user declines.
    """
    prompt = build_single_prompt(diff, options.commit_type, options.language)
    check_prompt(prompt, 1, options)

    text = generator.generate(prompt)
    message = postprocess(text.strip(), options.emoji, options.template)
    _display_proposal(message, bool(options.template))

    if not options.force:
        if _ask("Do you want to continue? (y/n)").lower() != "y":
            raise CommitAborted("Commit aborted by user 🙅‍♂️")

    committer.commit(message)
    return message


def generate_candidates(
    diff: str,
    options: RunOptions,
    generator: BaseLLMProvider,
    num_options: int = LIST_OPTIONS_COUNT,
) -> list[str]:
    """Ask the model for several messages and return the menu entries.

    The regenerate entry is always last.

    Raises:
        CommitAborted: If the prompt is refused.
    """
    prompt = build_list_prompt(diff, options.commit_type, options.language, num_options)
    check_prompt(prompt, num_options, options)

    text = generator.generate(prompt)
    candidates = [
        postprocess(option, options.emoji, options.template)
        for option in split_options(text)
    ]
    candidates.append(REGENERATE_OPTION)
    return candidates


def choose_candidate(candidates: list[str]) -> int:
    """Print a numbered menu and return the zero-based index picked.

    Raises:
        CommitAborted: If the input is not a number in range.
    """
    typer.echo("Select a commit message:")
    for i, candidate in enumerate(candidates, 1):
        typer.echo(f"{i}. {candidate}")

    answer = _ask(f"Enter your choice (1-{len(candidates)})")
    try:
        choice = int(answer)
    except ValueError:
        choice = 0

    if choice < 1 or choice > len(candidates):
        raise CommitAborted("Invalid choice. Exiting.")
    return choice - 1


def run_list(
    diff: str,
    options: RunOptions,
    generator: BaseLLMProvider,
    committer: Committer,
    num_options: int = LIST_OPTIONS_COUNT,
) -> str:
    """Offer candidate messages until one is picked, then commit it.

    Picking the regenerate entry requests fresh candidates for the same diff.

    Returns:
        The committed message.

    Raises:
        CommitAborted: If the prompt is refused or the choice is invalid.
    """
    while True:
        candidates = generate_candidates(diff, options, generator, num_options)
        index = choose_candidate(candidates)

        if index == len(candidates) - 1:
            typer.echo("Regenerating commit messages...", err=True)
            continue

        message = candidates[index]
        committer.commit(message)
        return message


def run(
    diff: str,
    options: RunOptions,
    generator: BaseLLMProvider,
    committer: Committer,
) -> str:
    """Dispatch to list or single mode."""
    if options.list_mode:
        return run_list(diff, options, generator, committer)
    return run_single(diff, options, generator, committer)
