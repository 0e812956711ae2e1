from typing import Optional

import ujson
from aiohttp import ClientResponse, ClientSession, ClientTimeout
from pydantic import ValidationError
from web3 import Web3

from bridge_gas_price.config import Config
from bridge_gas_price.config.gas_price import GAS_PRICE_BOUNDARIES
from bridge_gas_price.models.gas_models import ChainSide, OracleGasPrice, SpeedTierMap
from bridge_gas_price.utils.errors import OracleNotConfiguredError, OracleResponseError
from bridge_gas_price.utils.logger import LogArgs, get_logger

logger = get_logger(__name__)


def gas_price_within_limits(gas_price: float) -> float:
    """Clamps a gwei price into GAS_PRICE_BOUNDARIES."""
    if gas_price < GAS_PRICE_BOUNDARIES['MIN']:
        return GAS_PRICE_BOUNDARIES['MIN']
    if gas_price > GAS_PRICE_BOUNDARIES['MAX']:
        return GAS_PRICE_BOUNDARIES['MAX']
    return gas_price


class GasPriceOracleClient:
    """
    Client for gas station style oracles, which answer with a JSON object of
    gwei prices per speed tier, e.g.
    {"instant": 51.9, "fast": 17.64, "standard": 10.64, "slow": 4.4, "health": true, ...}
    """

    def __init__(self, config: Config, session: Optional[ClientSession] = None):
        self.config = config
        self._session = session

    @property
    def aiohttp_session(self) -> ClientSession:
        if self._session is None:
            from bridge_gas_price.utils import httputils

            return httputils.CLIENT_SESSION
        return self._session

    async def _get_response(self, url: str) -> dict:
        async with self.aiohttp_session.get(
            url,
            timeout=ClientTimeout(total=self.config.ORACLE_TIMEOUT),
            proxy=self.config.PROXY_URL,
        ) as response:
            response: ClientResponse
            logger.debug(f'Request GET {response.url}')
            response.raise_for_status()
            return await response.json(loads=ujson.loads, content_type=None)

    async def get_price(self, side: ChainSide) -> OracleGasPrice:
        """
        Returns the configured speed type price, multiplied by the side's factor
        and kept within GAS_PRICE_BOUNDARIES, in wei, along with the whole
        oracle response. Any transport or parse failure is raised.
        """
        side = ChainSide(side)
        chain_config = self.config.get_chain_config(side)
        url = chain_config.GAS_PRICE_ORACLE_URL
        if not url:
            raise OracleNotConfiguredError(side.value)

        data = await self._get_response(url)
        try:
            speeds = SpeedTierMap.model_validate(data)
        except ValidationError as e:
            raise OracleResponseError(side.value, str(e), oracle_url=url) from e

        speed_type = chain_config.GAS_PRICE_SPEED_TYPE
        oracle_gas_price = speeds.model_dump().get(speed_type)
        if (
            isinstance(oracle_gas_price, bool)
            or not isinstance(oracle_gas_price, (int, float))
            or not oracle_gas_price
        ):
            raise OracleResponseError(
                side.value,
                f"Response from Oracle didn't include gas price for {speed_type} type.",
                oracle_url=url,
            )

        normalized_gas_price = gas_price_within_limits(
            oracle_gas_price * chain_config.GAS_PRICE_FACTOR
        )
        gas_price = Web3.to_wei(f'{normalized_gas_price:.2f}', 'gwei')
        log_args = {
            LogArgs.chain_side: side.value,
            LogArgs.speed_type: speed_type,
            LogArgs.gas_price: gas_price,
        }
        logger.debug(
            f'Oracle gas price for %({LogArgs.chain_side})s, '
            f'%({LogArgs.speed_type})s: %({LogArgs.gas_price})s wei',
            log_args,
            extra=log_args,
        )
        return OracleGasPrice(oracle_gas_price=str(gas_price), oracle_response=speeds)
