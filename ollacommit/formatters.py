"""Commit message post-processing: gitmoji, templates and option lists."""

import re
from types import MappingProxyType

from ollacommit.git import get_branch

# Conventional commit type -> gitmoji
GITMOJI = MappingProxyType({
    "feat": "✨",
    "fix": "🚑",
    "docs": "📝",
    "style": "💄",
    "refactor": "♻️",
    "test": "✅",
    "chore": "🔧",
})

COMMIT_MESSAGE_PLACEHOLDER = "{COMMIT_MESSAGE}"
GIT_BRANCH_PLACEHOLDER = "{GIT_BRANCH}"

REGENERATE_OPTION = "♻️ Regenerate Commit Messages"

OPTION_SEPARATOR = ";"

_WORD_PATTERN = re.compile(r"\b[a-zA-Z]+\b")


def add_gitmoji(message: str) -> str:
    """Prefix the gitmoji for the message's commit type.

    The first alphabetic word is looked up exactly; unknown words leave the
    message untouched.

    Args:
        message: A commit message such as "feat: add login".

    Returns:
        The message, possibly prefixed with "<emoji> ".
    """
    match = _WORD_PATTERN.search(message)
    if not match:
        return message

    gitmoji = GITMOJI.get(match.group(0))
    if gitmoji is None:
        return message
    return f"{gitmoji} {message}"


def process_template(template: str, message: str) -> str:
    """Render a message through a template.

    Args:
        template: Text containing {COMMIT_MESSAGE} and optionally {GIT_BRANCH}.
        message: The commit message to insert.

    Returns:
        The rendered message.

    Raises:
        GitError: If {GIT_BRANCH} is used and the branch cannot be looked up.
    """
    rendered = template.replace(COMMIT_MESSAGE_PLACEHOLDER, message)

    if GIT_BRANCH_PLACEHOLDER in rendered:
        rendered = rendered.replace(GIT_BRANCH_PLACEHOLDER, get_branch())

    return rendered


def postprocess(message: str, emoji: bool, template: str) -> str:
    """Apply the gitmoji step then the template step."""
    if emoji:
        message = add_gitmoji(message)
    if template:
        message = process_template(template, message)
    return message


def split_options(text: str) -> list[str]:
    """Split a ';'-separated model reply into trimmed candidates.

    Empty segments are kept so every separator the model emitted shows up
    as a menu entry.
    """
    return [part.strip() for part in text.split(OPTION_SEPARATOR)]
