from typing import Awaitable, Callable, Mapping, Optional, Tuple, Type

from web3.contract import AsyncContract

from bridge_gas_price.clients.gas_price_oracle import GasPriceOracleClient
from bridge_gas_price.models.gas_models import ChainSide, FetchResult
from bridge_gas_price.utils.common import to_chain_side
from bridge_gas_price.utils.errors import (
    BaseGasPriceError,
    ContractUnavailableError,
    OracleUnavailableError,
    TotalFetchFailureError,
)
from bridge_gas_price.utils.logger import ERR, LogArgs, get_logger

logger = get_logger(__name__)

GasPriceSource = Tuple[
    str, Type[BaseGasPriceError], Callable[[ChainSide], Awaitable[FetchResult]]
]


class GasPriceFetcher:
    """
    Asks the gas price sources of a chain side in order, one attempt each:
    the oracle first, then the bridge contract `gasPrice()`.
    The first source that answers wins, failures are only reported.
    """

    def __init__(
        self,
        oracle_client: GasPriceOracleClient,
        bridge_contracts: Mapping[ChainSide, Optional[AsyncContract]],
    ):
        self.oracle_client = oracle_client
        self.bridge_contracts = bridge_contracts

    @property
    def sources(self) -> Tuple[GasPriceSource, ...]:
        return (
            ('oracle', OracleUnavailableError, self._fetch_from_oracle),
            ('contract', ContractUnavailableError, self._fetch_from_contract),
        )

    async def _fetch_from_oracle(self, side: ChainSide) -> FetchResult:
        oracle_gas_price = await self.oracle_client.get_price(side)
        return FetchResult(
            price=oracle_gas_price.oracle_gas_price,
            speed_tiers=oracle_gas_price.oracle_response,
        )

    async def _fetch_from_contract(self, side: ChainSide) -> FetchResult:
        bridge_contract = self.bridge_contracts.get(side)
        if bridge_contract is None:
            raise LookupError(f'No bridge contract configured for {side.value}')
        gas_price = await bridge_contract.functions.gasPrice().call()
        return FetchResult(price=str(int(gas_price)), speed_tiers=None)

    async def fetch(self, side: ChainSide) -> FetchResult:
        """
        Returns the first available gas price with the oracle speed tiers,
        which are only set when the oracle answered.
        If no source answered, both fields are None.
        """
        side = to_chain_side(side)
        for source, error_cls, attempt in self.sources:
            try:
                result = await attempt(side)
            except Exception as e:
                self._report(error_cls(side.value, str(e) or type(e).__name__))
                continue

            log_args = {
                LogArgs.chain_side: side.value,
                LogArgs.gas_price: result.price,
                LogArgs.gas_price_source: source,
            }
            logger.debug(
                f'Fetched gas price %({LogArgs.gas_price})s for %({LogArgs.chain_side})s '
                f'from %({LogArgs.gas_price_source})s',
                log_args,
                extra=log_args,
            )
            return result

        self._report(TotalFetchFailureError(side.value, 'no gas price source answered'))
        return FetchResult(price=None, speed_tiers=None)

    @staticmethod
    def _report(error: BaseGasPriceError) -> None:
        msg, log_args = error.to_log_args()
        logger.error(msg, log_args, extra={**log_args, ERR: error})
