from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ChainSide(str, Enum):
    HOME = 'home'
    FOREIGN = 'foreign'


class GasPriceOptions(str, Enum):
    GAS_PRICE = 'gasPrice'
    SPEED = 'speed'


class OracleGasPriceSpeeds(str, Enum):
    INSTANT = 'instant'
    FAST = 'fast'
    STANDARD = 'standard'
    SLOW = 'slow'


class SpeedTierMap(BaseModel):
    """
    Oracle response: gwei price per speed tier plus whatever metadata
    the oracle sends (health, block_time, block_number, ...).
    Only the tier prices are validated, metadata is kept as sent.
    """

    model_config = ConfigDict(frozen=True, extra='allow')

    instant: Optional[float] = None
    fast: Optional[float] = None
    standard: Optional[float] = None
    slow: Optional[float] = None
    health: Optional[Any] = None
    block_time: Optional[Any] = None
    block_number: Optional[Any] = None


class OracleGasPrice(BaseModel):
    model_config = ConfigDict(frozen=True)

    oracle_gas_price: str
    oracle_response: SpeedTierMap


class FetchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: Optional[str] = None
    speed_tiers: Optional[SpeedTierMap] = None


class GasPriceState(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: str
    speed_tiers: Optional[SpeedTierMap] = None

    @field_validator('price')
    @classmethod
    def price_in_wei(cls, value: str) -> str:
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f'gas price must be a non-negative integer in wei, got {value!r}')
        return value


class GasPriceOption(BaseModel):
    type: Optional[str] = None
    value: Optional[str] = None

    @field_validator('value', mode='before')
    @classmethod
    def value_to_str(cls, value: Any) -> Any:
        # wei amounts may come as numbers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class GasPriceResponse(BaseModel):
    side: ChainSide
    gas_price: str
    speed_tiers: Optional[SpeedTierMap] = None
    timestamp: int
