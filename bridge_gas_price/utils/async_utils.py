import asyncio
from typing import Awaitable, Callable, Union

from bridge_gas_price.utils.logger import get_logger

logger = get_logger(__name__)


def set_interval_and_run(
    func: Callable[[], Awaitable], interval: Union[int, str]
) -> asyncio.Task:
    """
    Runs `func` right away and then again every `interval` milliseconds.

    The next wait starts only after the previous call has finished, so there is
    at most one call in flight. An exception raised by `func` is logged and the
    loop goes on. Must be called from a running event loop.
    """
    delay = int(interval) / 1000

    async def run():
        while True:
            try:
                await func()
            except Exception:
                logger.exception('Interval task %s failed', getattr(func, '__name__', func))
            await asyncio.sleep(delay)

    return asyncio.create_task(run())
