from typing import Optional, Union

from pydantic import ValidationError
from web3 import Web3

from bridge_gas_price.models.gas_models import (
    GasPriceOption,
    GasPriceOptions,
    OracleGasPriceSpeeds,
    SpeedTierMap,
)
from bridge_gas_price.utils.errors import InvalidGasPriceOptionError
from bridge_gas_price.utils.logger import LogArgs, get_logger

logger = get_logger(__name__)

SPEED_TIERS = frozenset(speed.value for speed in OracleGasPriceSpeeds)


def _ignore_option(option: Union[GasPriceOption, dict], reason: str) -> None:
    if isinstance(option, GasPriceOption):
        option = option.model_dump()
    log_args = {LogArgs.gas_price_option: option, LogArgs.ex: reason}
    logger.warning(
        f'{InvalidGasPriceOptionError.msg_to_log}: %({LogArgs.ex})s. '
        f'Using the cached gas price',
        log_args,
        extra=log_args,
    )


def resolve_gas_price(
    option: Optional[Union[GasPriceOption, dict]],
    cached_price: str,
    cached_speed_tiers: Optional[SpeedTierMap],
) -> str:
    """
    Picks the gas price for the next transaction.

    - no option: the cached price
    - `gasPrice` option: the option value as is
    - `speed` option: the oracle tier price converted from gwei to wei, or the
      cached price if the last refresh has no tiers or the tier is unknown
    - any other option type: the cached price

    Never raises on a bad option, the cached price is returned instead.
    """
    if not option:
        return cached_price
    if isinstance(option, dict):
        try:
            option = GasPriceOption.model_validate(option)
        except ValidationError as e:
            _ignore_option(option, str(e))
            return cached_price
    if not option.type or not option.value:
        return cached_price

    if option.type == GasPriceOptions.GAS_PRICE:
        return option.value

    if option.type == GasPriceOptions.SPEED:
        if cached_speed_tiers is None:
            # last refresh fell back to the contract
            return cached_price
        if option.value not in SPEED_TIERS:
            _ignore_option(option, f'unknown speed type {option.value!r}')
            return cached_price
        gas_price_in_gwei = getattr(cached_speed_tiers, option.value)
        if not gas_price_in_gwei or gas_price_in_gwei < 0:
            return cached_price
        return str(Web3.to_wei(str(gas_price_in_gwei), 'gwei'))

    _ignore_option(option, f'unknown option type {option.type!r}')
    return cached_price
