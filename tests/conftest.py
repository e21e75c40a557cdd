"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from ollacommit.git.base import Committer
from ollacommit.llm.base import BaseLLMProvider


class FakeGenerator(BaseLLMProvider):
    """Returns canned replies in order and records every prompt."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.prompts = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.replies.pop(0)


class FakeCommitter(Committer):
    """Records committed messages instead of running git."""

    def __init__(self):
        self.messages = []

    def commit(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_raw_diff():
    """Raw `git diff --staged --no-color --no-prefix` output."""
    return """diff --git new_file.py new_file.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ new_file.py
@@ -0,0 +1,2 @@
+def hello():
+    print("Hello, world!")
diff --git existing_file.py existing_file.py
index 1234567..abcdefg 100644
--- existing_file.py
+++ existing_file.py
@@ -1,2 +1,2 @@
 def main():
-    print("old")
+    print("new")"""


@pytest.fixture
def sample_diff():
    """Diff text after noise stripping."""
    return """new file mode 100644
--- /dev/null
+++ new_file.py
+def hello():
+    print("Hello, world!")"""


@pytest.fixture
def fake_committer():
    return FakeCommitter()


@pytest.fixture
def make_generator():
    """Factory for FakeGenerator instances."""
    return FakeGenerator
