import asyncio
import enum
import logging
import time
from dataclasses import dataclass
from typing import Optional

from folderscope.ai.errors import DeadlineExceededError, NoCredentialsError

logger = logging.getLogger(__name__)

DEFAULT_DEADLINE_SECONDS = 240
DEFAULT_ROTATION_DELAY = 1.0

RETRYABLE_MARKERS = (
    "429",
    "Too Many Requests",
    "quota",
    "rate limit",
    "exceeded your current quota",
    "API key not valid",
    "503",
    "Service Unavailable",
    "overloaded",
    "Please try again later",
)

OVERLOAD_MARKERS = ("503", "Service Unavailable", "overloaded", "Please try again later")


class ErrorClass(enum.Enum):
    RETRYABLE = "retryable"
    FATAL = "fatal"


def classify(message):
    """Retryable only when the message matches a known throttling/overload marker."""
    message = message or ""
    if any(marker in message for marker in RETRYABLE_MARKERS):
        return ErrorClass.RETRYABLE
    return ErrorClass.FATAL


def rotation_reason(message):
    message = message or ""
    if "API key not valid" in message:
        return "invalid key"
    if any(marker in message for marker in OVERLOAD_MARKERS):
        return "overloaded"
    return "rate limit"


class RotationObserver:
    """Receives executor events. Slots are pool indices, never key values."""

    def on_attempt(self, attempt, slot, pool_size):
        pass

    def on_success(self, attempt, slot):
        pass

    def on_rotation(self, attempt, from_slot, to_slot, elapsed, remaining, reason):
        pass

    def on_fatal(self, attempt, slot, error):
        pass

    def on_deadline(self, attempts, pool_size, elapsed):
        pass


class LoggingObserver(RotationObserver):
    def __init__(self, log=None):
        self.log = log or logger

    def on_attempt(self, attempt, slot, pool_size):
        self.log.info("🔑 Attempt %s using key #%s of %s", attempt, slot + 1, pool_size)

    def on_success(self, attempt, slot):
        self.log.info("✅ Key #%s succeeded on attempt %s", slot + 1, attempt)

    def on_rotation(self, attempt, from_slot, to_slot, elapsed, remaining, reason):
        self.log.warning(
            "⚠️ Key #%s failed (%s) on attempt %s; rotating to key #%s "
            "(%.1fs elapsed, %.1fs remaining)",
            from_slot + 1,
            reason,
            attempt,
            to_slot + 1,
            elapsed,
            remaining,
        )

    def on_fatal(self, attempt, slot, error):
        self.log.error(
            "❌ Non-retryable error with key #%s on attempt %s: %s",
            slot + 1,
            attempt,
            error,
        )

    def on_deadline(self, attempts, pool_size, elapsed):
        self.log.error(
            "⏰ Gave up after %s attempts across %s key(s) in %.1fs",
            attempts,
            pool_size,
            elapsed,
        )


@dataclass
class AttemptState:
    started_at: float
    index: int = 0
    attempts: int = 0
    last_error: Optional[Exception] = None


class KeyRotator:
    """Run one operation against a pool of API keys until it succeeds.

    Keys are tried one at a time in pool order. A retryable failure moves on
    to the next key (wrapping around) after ``rotation_delay`` seconds; any
    other failure is raised as-is. No new attempt starts once
    ``deadline_seconds`` have passed since the first one, and there is no
    pause when it would run past that point.
    """

    def __init__(
        self,
        deadline_seconds=DEFAULT_DEADLINE_SECONDS,
        rotation_delay=DEFAULT_ROTATION_DELAY,
        observer=None,
        clock=time.monotonic,
        sleep=asyncio.sleep,
    ):
        self.deadline_seconds = deadline_seconds
        self.rotation_delay = rotation_delay
        self.observer = observer or LoggingObserver()
        self.clock = clock
        self.sleep = sleep

    async def execute(self, pool, build_client, perform_operation):
        if not pool:
            raise NoCredentialsError()

        pool_size = len(pool)
        state = AttemptState(started_at=self.clock())

        while self.clock() - state.started_at < self.deadline_seconds:
            state.attempts += 1
            slot = state.index
            self.observer.on_attempt(state.attempts, slot, pool_size)

            try:
                client = build_client(pool[slot])
                result = await perform_operation(client)
            except Exception as exc:
                if classify(str(exc)) is ErrorClass.FATAL:
                    self.observer.on_fatal(state.attempts, slot, exc)
                    raise

                state.last_error = exc
                state.index = (slot + 1) % pool_size
                elapsed = self.clock() - state.started_at
                remaining = max(self.deadline_seconds - elapsed, 0.0)
                self.observer.on_rotation(
                    state.attempts,
                    slot,
                    state.index,
                    elapsed,
                    remaining,
                    rotation_reason(str(exc)),
                )
                # No attempt could start after the pause.
                if remaining <= self.rotation_delay:
                    break
                await self.sleep(self.rotation_delay)
                continue

            self.observer.on_success(state.attempts, slot)
            return result

        self.observer.on_deadline(
            state.attempts, pool_size, self.clock() - state.started_at
        )
        last_message = str(state.last_error) if state.last_error else "no attempt completed"
        raise DeadlineExceededError(state.attempts, pool_size, last_message)


async def execute(
    pool,
    build_client,
    perform_operation,
    deadline_seconds=DEFAULT_DEADLINE_SECONDS,
    rotation_delay=DEFAULT_ROTATION_DELAY,
    observer=None,
):
    rotator = KeyRotator(
        deadline_seconds=deadline_seconds,
        rotation_delay=rotation_delay,
        observer=observer,
    )
    return await rotator.execute(pool, build_client, perform_operation)
