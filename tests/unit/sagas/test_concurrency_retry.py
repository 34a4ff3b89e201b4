"""Unit tests for ConcurrencyRetryPolicy."""

from __future__ import annotations

import asyncio
import dataclasses

import pytest
import tenacity

from saga_storage.config import SagaStorageSettings
from saga_storage.kernel.types import new_saga_id
from saga_storage.sagas import (
    ConcurrencyRetryPolicy,
    InMemorySagaStorage,
    SagaData,
    SagaNotFoundError,
    StaleRevisionError,
)


@dataclasses.dataclass
class CounterSagaData(SagaData):
    key: str = ""
    hits: int = 0


def _policy(max_attempts: int = 3) -> ConcurrencyRetryPolicy:
    return ConcurrencyRetryPolicy(max_attempts=max_attempts, wait=tenacity.wait_none())


def _stale() -> StaleRevisionError:
    return StaleRevisionError(saga_id=new_saga_id(), revision=0, current_revision=1)


class TestConcurrencyRetryPolicy:
    def test_returns_result_without_retry(self) -> None:
        assert _policy().execute(lambda: 42) == 42

    def test_retries_until_success(self) -> None:
        calls: list[int] = []

        def flaky() -> str:
            calls.append(1)
            if len(calls) < 3:
                raise _stale()
            return "ok"

        assert _policy(max_attempts=3).execute(flaky) == "ok"
        assert len(calls) == 3

    def test_reraises_after_max_attempts(self) -> None:
        calls: list[int] = []

        def always_stale() -> None:
            calls.append(1)
            raise _stale()

        with pytest.raises(StaleRevisionError):
            _policy(max_attempts=4).execute(always_stale)
        assert len(calls) == 4

    def test_other_errors_are_not_retried(self) -> None:
        calls: list[int] = []

        def gone() -> None:
            calls.append(1)
            raise SagaNotFoundError(new_saga_id(), "updated")

        with pytest.raises(SagaNotFoundError):
            _policy().execute(gone)
        assert len(calls) == 1

    def test_execute_async(self) -> None:
        calls: list[int] = []

        async def flaky() -> int:
            calls.append(1)
            if len(calls) == 1:
                raise _stale()
            return 7

        assert asyncio.run(_policy().execute_async(flaky)) == 7
        assert len(calls) == 2

    def test_invalid_max_attempts(self) -> None:
        with pytest.raises(ValueError):
            ConcurrencyRetryPolicy(max_attempts=0)

    def test_from_settings(self) -> None:
        settings = SagaStorageSettings(retry_max_attempts=9, retry_max_wait_seconds=0.0)
        assert ConcurrencyRetryPolicy.from_settings(settings).max_attempts == 9

    def test_recovers_lost_update_race(self) -> None:
        storage = InMemorySagaStorage()
        storage.insert(CounterSagaData(id=new_saga_id(), key="k"), ["key"])
        rival = storage.find(CounterSagaData, "key", "k")
        assert rival is not None
        attempts: list[int] = []

        def handle() -> None:
            data = storage.find(CounterSagaData, "key", "k")
            assert data is not None
            if not attempts:
                # another handler commits between our read and our write
                storage.update(rival, ["key"])
            attempts.append(1)
            data.hits += 1
            storage.update(data, ["key"])

        _policy().execute(handle)

        stored = storage.find(CounterSagaData, "key", "k")
        assert stored is not None
        assert len(attempts) == 2
        assert stored.hits == 1
        assert stored.revision == 2
