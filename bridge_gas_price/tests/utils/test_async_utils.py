import asyncio
import contextlib

import pytest

from bridge_gas_price.utils.async_utils import set_interval_and_run


async def _stop(task: asyncio.Task):
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task


@pytest.mark.asyncio()
async def test_set_interval_and_run_runs_immediately_and_repeats():
    calls = []

    async def tick():
        calls.append(1)

    task = set_interval_and_run(tick, 600000)
    await asyncio.sleep(0)
    assert len(calls) == 1
    await _stop(task)

    calls.clear()
    task = set_interval_and_run(tick, '5')
    await asyncio.sleep(0.1)
    await _stop(task)
    assert len(calls) >= 2


@pytest.mark.asyncio()
async def test_set_interval_and_run_waits_for_pending_call():
    calls = []
    release = asyncio.Event()

    async def slow_tick():
        calls.append(1)
        await release.wait()

    task = set_interval_and_run(slow_tick, 1)
    await asyncio.sleep(0.05)
    assert len(calls) == 1

    release.set()
    await asyncio.sleep(0.05)
    await _stop(task)
    assert len(calls) >= 2


@pytest.mark.asyncio()
async def test_set_interval_and_run_survives_errors():
    calls = []

    async def failing_tick():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError('boom')

    task = set_interval_and_run(failing_tick, 1)
    await asyncio.sleep(0.05)
    await _stop(task)
    assert len(calls) >= 2
