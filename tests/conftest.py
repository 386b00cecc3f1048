"""Shared test fixtures and configuration."""

import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from opencommit.config import API_KEY_ENV_VARS, CONFIG_KEYS, ResolvedConfig, env_var_for_key
from opencommit.git.ignore import DEFAULT_IGNORE_PATTERNS
from opencommit.interactive import UserCancelledError


class FakeEncoding:
    """Stand-in for the BPE encoding: one token per character."""

    def encode(self, text, **kwargs):
        return list(text)


class FakeRepository:
    """In-memory repository collaborator."""

    def __init__(self, staged=None, changed=None, remotes=None, diff="diff --git a/app.py b/app.py"):
        self.staged = list(staged or [])
        self.changed = list(changed or [])
        self._remotes = list(remotes or [])
        self.diff = diff
        self.stage_calls = []
        self.diff_calls = []
        self.commits = []
        self.pushes = []

    def ignore_patterns(self):
        return list(DEFAULT_IGNORE_PATTERNS)

    def staged_files(self, ignore_patterns):
        return sorted(set(self.staged))

    def changed_files(self, ignore_patterns):
        return sorted(set(self.changed))

    def stage(self, files):
        self.stage_calls.append(list(files))
        self.staged = sorted(set(self.staged) | set(files))

    def diff_text(self, files):
        self.diff_calls.append(list(files))
        return self.diff

    def commit(self, message, extra_args):
        self.commits.append((message, list(extra_args)))
        return ""

    def remotes(self):
        return list(self._remotes)

    def push(self, remote):
        self.pushes.append(remote)
        return ""


class FakePrompter:
    """Prompter that replays scripted answers.

    An answer that is an exception instance is raised instead of returned.
    Running out of answers fails the test.
    """

    def __init__(self, confirm=None, select=None, checkbox=None):
        self.answers = {
            "confirm": list(confirm or []),
            "select": list(select or []),
            "checkbox": list(checkbox or []),
        }
        self.calls = []

    def _answer(self, kind, message, choices=None):
        self.calls.append((kind, message, choices))
        if not self.answers[kind]:
            raise AssertionError(f"Unexpected {kind} prompt: {message}")
        answer = self.answers[kind].pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    def confirm(self, message, default=True):
        return self._answer("confirm", message)

    def select(self, message, choices):
        return self._answer("select", message, list(choices))

    def checkbox(self, message, choices):
        return self._answer("checkbox", message, list(choices))

    def messages(self, kind=None):
        return [message for k, message, _ in self.calls if kind is None or k == kind]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def fake_encoding(request, mocker):
    """Avoid downloading tokenizer data."""
    if request.node.get_closest_marker("real_tokenizer"):
        return None
    return mocker.patch("opencommit.llm.tokens.get_encoding", return_value=FakeEncoding())


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, mocker, temp_dir):
    """Keep the user's config file, .env and environment out of tests."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(env_var_for_key(key), raising=False)
    for env_var in API_KEY_ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    mocker.patch("opencommit.config.load_dotenv")
    config_dir = temp_dir / ".opencommit"
    mocker.patch("opencommit.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def make_config():
    """Factory for configurations using the deterministic provider."""

    def _make(**overrides):
        values = {"ai_provider": "test", "model": "test", "gitpush": False}
        values.update(overrides)
        return ResolvedConfig(**values)

    return _make


@pytest.fixture
def quiet_console():
    """Console that writes to a buffer."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def cancelled():
    """A dismissed prompt."""
    return UserCancelledError("Prompt cancelled")


@pytest.fixture
def sample_diff():
    """Sample staged diff."""
    return """diff --git a/src/server.ts b/src/server.ts
index ad4db42..f3b18a9 100644
--- a/src/server.ts
+++ b/src/server.ts
@@ -10,7 +10,7 @@
 const app = express();
-const port = 7799;
+const PORT = 7799;
"""


@pytest.fixture
def make_repo():
    """Factory for in-memory repositories."""
    return FakeRepository


@pytest.fixture
def make_prompter():
    """Factory for scripted prompters."""
    return FakePrompter
