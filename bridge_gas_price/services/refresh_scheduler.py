import asyncio
import contextlib
from typing import Optional, Union

from bridge_gas_price.config import Config
from bridge_gas_price.config.gas_price import DEFAULT_UPDATE_INTERVAL
from bridge_gas_price.models.gas_models import ChainSide, GasPriceState
from bridge_gas_price.services.gas_price_fetcher import GasPriceFetcher
from bridge_gas_price.services.gas_price_state import GasPriceStore
from bridge_gas_price.utils.async_utils import set_interval_and_run
from bridge_gas_price.utils.common import to_chain_side
from bridge_gas_price.utils.logger import LogArgs, get_logger

logger = get_logger(__name__)


class RefreshScheduler:
    """Keeps the GasPriceStore of one chain side up to date."""

    def __init__(
        self,
        side: ChainSide,
        fetcher: GasPriceFetcher,
        store: GasPriceStore,
        config: Config,
    ):
        self.side = to_chain_side(side)
        self.fetcher = fetcher
        self.store = store
        self.config = config
        self._task: Optional[asyncio.Task] = None

    def get_update_interval(self) -> Union[int, str]:
        interval = self.config.get_chain_config(self.side).GAS_PRICE_UPDATE_INTERVAL
        if interval is None:
            return DEFAULT_UPDATE_INTERVAL
        return interval

    def start(self) -> None:
        """
        Refreshes right away and then every update interval, for the lifetime
        of the process. The interval is read from config only here.
        """
        if self._task is not None:
            return
        interval = self.get_update_interval()
        log_args = {LogArgs.chain_side: self.side.value, LogArgs.update_interval: interval}
        logger.info(
            f'Starting gas price updates for %({LogArgs.chain_side})s '
            f'every %({LogArgs.update_interval})s ms',
            log_args,
            extra=log_args,
        )
        self._task = set_interval_and_run(self.refresh, interval)

    async def shutdown(self) -> None:
        """Cancels the refresh task on process shutdown."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task

    async def refresh(self) -> None:
        result = await self.fetcher.fetch(self.side)
        if result.price is not None:
            state = GasPriceState(price=result.price, speed_tiers=result.speed_tiers)
        else:
            # keep the known price, but never keep tiers from an older refresh
            state = GasPriceState(price=self.store.snapshot().price, speed_tiers=None)
        self.store.replace(state)

        log_args = {LogArgs.chain_side: self.side.value, LogArgs.gas_price: state.price}
        logger.debug(
            f'Gas price for %({LogArgs.chain_side})s is %({LogArgs.gas_price})s wei',
            log_args,
            extra=log_args,
        )
