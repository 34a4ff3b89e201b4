"""Sagas – ConcurrencyRetryPolicy.

:class:`~saga_storage.sagas.errors.ConcurrencyViolationError` is the
storage's "you lost the race" signal. The storage never retries on its own;
whoever dispatches the message re-runs the whole unit of work (find, apply,
update) with this policy.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, TypeVar

import tenacity

from saga_storage.observability.logging import get_logger
from saga_storage.sagas.errors import ConcurrencyViolationError

if TYPE_CHECKING:
    from saga_storage.config.settings import SagaStorageSettings

T = TypeVar("T")


class ConcurrencyRetryPolicy:
    """Re-run a unit of work while it fails with a concurrency violation.

    Parameters
    ----------
    max_attempts:
        Maximum number of attempts, the first one included.
    wait:
        A ``tenacity`` wait strategy. Defaults to a small randomised
        exponential backoff capped at half a second.

    Any other exception propagates immediately. Once *max_attempts* is
    exhausted the last :class:`ConcurrencyViolationError` is re-raised.

    Example
    -------
    ::

        policy = ConcurrencyRetryPolicy(max_attempts=5)

        def handle() -> None:
            data = storage.find(OrderSagaData, "order_code", message.code)
            data.paid = True
            storage.update(data, ["order_code"])

        policy.execute(handle)
    """

    def __init__(self, max_attempts: int = 5, wait: Any = None) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._max_attempts = max_attempts
        self._wait = wait or tenacity.wait_random_exponential(multiplier=0.01, max=0.5)
        self._log = get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: "SagaStorageSettings") -> "ConcurrencyRetryPolicy":
        return cls(
            max_attempts=settings.retry_max_attempts,
            wait=tenacity.wait_random_exponential(
                multiplier=0.01, max=settings.retry_max_wait_seconds
            ),
        )

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def execute(self, func: Callable[[], T]) -> T:
        """Run *func* synchronously with retry."""
        return tenacity.Retrying(**self._retry_kwargs())(func)

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        """Run the coroutine factory *func* with retry."""
        async for attempt in tenacity.AsyncRetrying(**self._retry_kwargs()):
            with attempt:
                result = await func()
        return result  # type: ignore[return-value]

    def _retry_kwargs(self) -> dict[str, Any]:
        return {
            "stop": tenacity.stop_after_attempt(self._max_attempts),
            "wait": self._wait,
            "retry": tenacity.retry_if_exception_type(ConcurrencyViolationError),
            "reraise": True,
            "before_sleep": self._log_retry,
        }

    def _log_retry(self, retry_state: tenacity.RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        self._log.info(
            "saga_concurrency_retry",
            attempt=retry_state.attempt_number,
            max_attempts=self._max_attempts,
            saga_id=str(getattr(exc, "saga_id", "")),
            code=getattr(exc, "code", None),
        )


__all__ = ["ConcurrencyRetryPolicy"]
