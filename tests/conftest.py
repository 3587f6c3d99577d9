"""
Pytest configuration and fixtures for folderscope tests.
"""

from pathlib import Path

import pytest

from folderscope.ai.base import Provider, ProviderResult
from folderscope.ai.rotation import KeyRotator, RotationObserver


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Async sleep that advances the fake clock instead of waiting."""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        self.clock.advance(seconds)


class RecordingObserver(RotationObserver):
    def __init__(self):
        self.events = []

    def on_attempt(self, attempt, slot, pool_size):
        self.events.append(("attempt", attempt, slot))

    def on_success(self, attempt, slot):
        self.events.append(("success", attempt, slot))

    def on_rotation(self, attempt, from_slot, to_slot, elapsed, remaining, reason):
        self.events.append(("rotation", from_slot, to_slot, reason, elapsed, remaining))

    def on_fatal(self, attempt, slot, error):
        self.events.append(("fatal", attempt, slot))

    def on_deadline(self, attempts, pool_size, elapsed):
        self.events.append(("deadline", attempts, pool_size))


class ScriptedOperation:
    """Plays back a list of outcomes, one per attempt.

    Exceptions in the script are raised; anything else is returned. The last
    outcome repeats once the script runs out.
    """

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.keys_used: list[str] = []

    def build_client(self, api_key):
        return api_key

    async def __call__(self, client):
        self.keys_used.append(client)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def make_fake_provider(outcomes):
    """Build a Provider subclass that answers from ``outcomes`` instead of the network.

    Each call returns a fresh class, so the script and the recorded keys and
    prompts belong to one test only.
    """

    class FakeProvider(Provider):
        name = "fake"

        async def generate(self, prompt, model):
            cls = type(self)
            cls.keys_used.append(self.api_key)
            cls.prompts.append(prompt)
            outcome = cls.outcomes.pop(0) if len(cls.outcomes) > 1 else cls.outcomes[0]
            if isinstance(outcome, BaseException):
                raise outcome
            return ProviderResult(content=outcome, provider=self.name)

    FakeProvider.outcomes = list(outcomes)
    FakeProvider.keys_used = []
    FakeProvider.prompts = []
    return FakeProvider


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_sleep(clock: FakeClock) -> RecordingSleep:
    return RecordingSleep(clock)


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def make_rotator(clock, fake_sleep, observer):
    """Build a KeyRotator wired to the fake clock, sleep and observer."""

    def _make(deadline_seconds: float = 240, rotation_delay: float = 1.0, **kwargs):
        kwargs.setdefault("observer", observer)
        return KeyRotator(
            deadline_seconds=deadline_seconds,
            rotation_delay=rotation_delay,
            clock=clock,
            sleep=fake_sleep,
            **kwargs,
        )

    return _make


@pytest.fixture
def fake_provider():
    return make_fake_provider(["The project is a small CLI."])


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """Create a small project tree with files that should and should not be read."""
    project = tmp_path / "demo_project"
    (project / "src").mkdir(parents=True)
    (project / "node_modules" / "left-pad").mkdir(parents=True)
    (project / ".git").mkdir()

    (project / "README.md").write_text("# Demo\n")
    (project / "src" / "main.py").write_text("def main():\n    return 42\n")
    (project / "src" / "util.js").write_text("export const add = (a, b) => a + b;\n")
    (project / "node_modules" / "left-pad" / "index.js").write_text("module.exports = 1;\n")
    (project / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (project / "debug.log").write_text("noise\n")
    (project / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (project / ".env").write_text("SECRET=1\n")

    return project
