# tests/core/test_scheduler.py

import asyncio
from unittest.mock import MagicMock

import pytest

from ecssd.core.exceptions import FatalError, PublishError
from ecssd.core.scheduler import Scheduler


@pytest.mark.asyncio
async def test_add_job_schedules_correctly():
    """
    Tests that the Scheduler's add_job method correctly adds a task to the asyncio loop.
    """
    scheduler = Scheduler()
    mock_job = MagicMock()

    async def async_job():
        mock_job()

    scheduler.add_job(async_job, interval_seconds=120)

    assert len(scheduler.tasks) == 1
    task = scheduler.tasks[0]
    assert not task.done()

    await asyncio.sleep(0)
    mock_job.assert_called_once()

    await scheduler.stop()
    assert task.cancelled() or task.done()
    assert scheduler.tasks == []


def test_add_job_rejects_non_positive_interval():
    scheduler = Scheduler()

    async def async_job():
        pass

    with pytest.raises(ValueError):
        scheduler.add_job(async_job, interval_seconds=0)


@pytest.mark.asyncio
async def test_non_fatal_errors_keep_the_loop_running():
    scheduler = Scheduler()
    calls = []

    async def flaky_job():
        calls.append(1)
        raise RuntimeError("transient")

    scheduler.add_job(flaky_job, interval_seconds=1)
    await asyncio.sleep(0)
    task = scheduler.tasks[0]

    assert calls == [1]
    assert not task.done()
    await scheduler.stop()


@pytest.mark.asyncio
async def test_fatal_error_ends_wait():
    scheduler = Scheduler()

    async def failing_publish():
        raise PublishError("disk full")

    scheduler.add_job(failing_publish, interval_seconds=60)

    with pytest.raises(FatalError):
        await asyncio.wait_for(scheduler.wait(), timeout=5)
    await scheduler.stop()
