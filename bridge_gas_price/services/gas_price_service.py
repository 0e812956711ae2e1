from typing import Optional, Union

from bridge_gas_price.config import Config
from bridge_gas_price.models.gas_models import ChainSide, GasPriceOption, GasPriceState
from bridge_gas_price.services.gas_price_fetcher import GasPriceFetcher
from bridge_gas_price.services.gas_price_options import resolve_gas_price
from bridge_gas_price.services.gas_price_state import GasPriceStore
from bridge_gas_price.services.refresh_scheduler import RefreshScheduler
from bridge_gas_price.utils.common import to_chain_side


class GasPriceService:
    """
    Gas prices of both bridge sides. Each side has its own store, seeded with
    the configured fallback price, and its own refresh scheduler.
    Usage:
        gas_service = GasPriceService(config=config, fetcher=fetcher)
        gas_service.start_all()
        gas_service.get_price('home', {'type': 'speed', 'value': 'fast'})
        # '17640000000'
    """

    def __init__(self, config: Config, fetcher: GasPriceFetcher):
        self.config = config
        self.fetcher = fetcher
        self.stores = {
            side: GasPriceStore(side, config.get_chain_config(side).GAS_PRICE_FALLBACK)
            for side in ChainSide
        }
        self.schedulers = {
            side: RefreshScheduler(side, fetcher, self.stores[side], config)
            for side in ChainSide
        }

    def start(self, side: Union[ChainSide, str]) -> None:
        self.schedulers[to_chain_side(side)].start()

    def start_all(self) -> None:
        for side in ChainSide:
            self.start(side)

    async def shutdown_all(self) -> None:
        for scheduler in self.schedulers.values():
            await scheduler.shutdown()

    def get_state(self, side: Union[ChainSide, str]) -> GasPriceState:
        return self.stores[to_chain_side(side)].snapshot()

    def get_price(
        self,
        side: Union[ChainSide, str],
        option: Optional[Union[GasPriceOption, dict]] = None,
    ) -> str:
        state = self.get_state(side)
        return resolve_gas_price(option, state.price, state.speed_tiers)
