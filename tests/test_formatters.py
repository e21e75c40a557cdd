"""Tests for ollacommit.formatters module."""

import pytest

from ollacommit.formatters import (
    GITMOJI,
    REGENERATE_OPTION,
    add_gitmoji,
    postprocess,
    process_template,
    split_options,
)
from ollacommit.git import GitError


class TestGitmojiTable:
    """Tests for the GITMOJI mapping."""

    def test_covers_seven_types(self):
        assert set(GITMOJI) == {"feat", "fix", "docs", "style", "refactor", "test", "chore"}

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            GITMOJI["perf"] = "⚡"


class TestAddGitmoji:
    """Tests for add_gitmoji."""

    def test_feat(self):
        assert add_gitmoji("feat: add login") == "✨ feat: add login"

    @pytest.mark.parametrize("commit_type", sorted(GITMOJI))
    def test_each_known_type(self, commit_type):
        message = f"{commit_type}: change things"

        assert add_gitmoji(message) == f"{GITMOJI[commit_type]} {message}"

    def test_unknown_type_unchanged(self):
        assert add_gitmoji("unknown: x") == "unknown: x"

    def test_uppercase_type_unchanged(self):
        assert add_gitmoji("Feat: add login") == "Feat: add login"

    def test_first_word_after_leading_symbols(self):
        assert add_gitmoji("- fix: typo") == "🚑 - fix: typo"

    def test_no_alphabetic_word(self):
        assert add_gitmoji("123 ...") == "123 ..."

    def test_empty_message(self):
        assert add_gitmoji("") == ""


class TestProcessTemplate:
    """Tests for process_template."""

    def test_branch_and_message(self, mocker):
        mocker.patch("ollacommit.formatters.get_branch", return_value="main")

        result = process_template("[{GIT_BRANCH}] {COMMIT_MESSAGE}", "fix: bug")

        assert result == "[main] fix: bug"

    def test_message_only_skips_branch_lookup(self, mocker):
        mock_branch = mocker.patch("ollacommit.formatters.get_branch")

        result = process_template("{COMMIT_MESSAGE} (auto)", "docs: readme")

        assert result == "docs: readme (auto)"
        mock_branch.assert_not_called()

    def test_repeated_placeholders(self, mocker):
        mocker.patch("ollacommit.formatters.get_branch", return_value="dev")

        result = process_template("{GIT_BRANCH}/{GIT_BRANCH}: {COMMIT_MESSAGE}", "x")

        assert result == "dev/dev: x"

    def test_branch_failure_propagates(self, mocker):
        mocker.patch("ollacommit.formatters.get_branch", side_effect=GitError("fatal"))

        with pytest.raises(GitError):
            process_template("{GIT_BRANCH} {COMMIT_MESSAGE}", "x")


class TestPostprocess:
    """Tests for postprocess."""

    def test_emoji_then_template(self, mocker):
        mocker.patch("ollacommit.formatters.get_branch", return_value="main")

        result = postprocess("feat: a", True, "[{GIT_BRANCH}] {COMMIT_MESSAGE}")

        assert result == "[main] ✨ feat: a"

    def test_nothing_enabled(self):
        assert postprocess("feat: a", False, "") == "feat: a"


class TestSplitOptions:
    """Tests for split_options."""

    def test_splits_and_trims(self):
        assert split_options("feat: a ; fix: b ;chore: c") == ["feat: a", "fix: b", "chore: c"]

    def test_keeps_empty_segments(self):
        assert split_options("feat: a;; fix: b;\n") == ["feat: a", "", "fix: b", ""]

    def test_single_option(self):
        assert split_options("  feat: a  ") == ["feat: a"]

    def test_regenerate_option_text(self):
        assert REGENERATE_OPTION == "♻️ Regenerate Commit Messages"
