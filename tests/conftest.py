"""Shared test fixtures and configuration."""

import subprocess
import tempfile
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import anthropic
import httpx
import openai
import pytest


OPENAI_URL = "https://api.openai.com/v1/chat/completions"
ANTHROPIC_URL = "https://api.anthropic.com/v1/messages"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config_dir(temp_dir, mocker):
    """Point ~/.commitmuse at a temporary directory for every test."""
    config_dir = temp_dir / ".commitmuse"
    mocker.patch("commitmuse.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def fake_git(mocker):
    """Patch subprocess.run with a table of git responses.

    Keys are argument tuples as passed after ``git [-C path]``; values are
    stdout strings or exceptions to raise. Unknown commands fail like git.
    """
    responses = {}
    calls = []

    def run(command, **kwargs):
        args = list(command[1:])
        if args[:1] == ["-C"]:
            args = args[2:]
        calls.append(args)
        value = responses.get(tuple(args))
        if value is None:
            raise subprocess.CalledProcessError(128, command, stderr="fatal: unexpected command")
        if isinstance(value, BaseException):
            raise value
        result = MagicMock()
        result.stdout = value
        result.returncode = 0
        return result

    mocker.patch("subprocess.run", side_effect=run)
    return SimpleNamespace(responses=responses, calls=calls)


@pytest.fixture
def sample_diff():
    """Staged diff touching one modified and one new Python file."""
    return """diff --git a/app/service.py b/app/service.py
index 1234567..abcdefg 100644
--- a/app/service.py
+++ b/app/service.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
diff --git a/app/new_file.py b/app/new_file.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/app/new_file.py
@@ -0,0 +1,2 @@
+def hello():
+    print("Hello, world!")
"""


def make_file_diff(path: str, added: int = 0, removed: int = 0, line: str = "value = 1") -> str:
    """Build a single-file unified diff with the given line counts."""
    parts = [
        f"diff --git a/{path} b/{path}",
        "index 1111111..2222222 100644",
        f"--- a/{path}",
        f"+++ b/{path}",
        f"@@ -1,{removed} +1,{added} @@",
    ]
    parts += [f"-{line}" for _ in range(removed)]
    parts += [f"+{line}" for _ in range(added)]
    return "\n".join(parts) + "\n"


def chat_completion(content):
    """OpenAI-shaped chat completion response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def anthropic_message(text):
    """Anthropic-shaped messages response."""
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


_OPENAI_STATUS_ERRORS = {
    401: openai.AuthenticationError,
    403: openai.PermissionDeniedError,
    404: openai.NotFoundError,
    429: openai.RateLimitError,
}

_ANTHROPIC_STATUS_ERRORS = {
    401: anthropic.AuthenticationError,
    403: anthropic.PermissionDeniedError,
    404: anthropic.NotFoundError,
    429: anthropic.RateLimitError,
}


def openai_status_error(status, body=None, url=OPENAI_URL):
    error_class = _OPENAI_STATUS_ERRORS.get(status, openai.APIStatusError)
    response = httpx.Response(status, request=httpx.Request("POST", url))
    return error_class(f"Error code: {status}", response=response, body=body)


def anthropic_status_error(status, body=None):
    error_class = _ANTHROPIC_STATUS_ERRORS.get(status, anthropic.APIStatusError)
    response = httpx.Response(status, request=httpx.Request("POST", ANTHROPIC_URL))
    return error_class(f"Error code: {status}", response=response, body=body)


@pytest.fixture
def file_diff():
    """Factory for single-file diffs, see make_file_diff."""
    return make_file_diff


@pytest.fixture
def sdk():
    """Builders for fake SDK responses and errors."""
    return SimpleNamespace(
        chat_completion=chat_completion,
        anthropic_message=anthropic_message,
        openai_status_error=openai_status_error,
        anthropic_status_error=anthropic_status_error,
    )
