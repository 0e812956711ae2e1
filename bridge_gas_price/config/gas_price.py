from typing import Optional

from pydantic import BaseModel, PositiveInt
from pydantic_settings import BaseSettings

# 10 minutes, in milliseconds
DEFAULT_UPDATE_INTERVAL = 600000

# gwei
GAS_PRICE_BOUNDARIES = {
    'MIN': 1,
    'MAX': 250,
}

DEFAULT_GAS_PRICE_FALLBACK = '1000000000'


class ChainGasPriceConfig(BaseModel):
    """Gas price settings of a single chain side, without the env prefix."""

    RPC_URL: Optional[str] = None
    BRIDGE_ADDRESS: Optional[str] = None
    GAS_PRICE_ORACLE_URL: Optional[str] = None
    GAS_PRICE_SPEED_TYPE: str = 'standard'
    GAS_PRICE_FACTOR: float = 1
    GAS_PRICE_FALLBACK: str = DEFAULT_GAS_PRICE_FALLBACK
    GAS_PRICE_UPDATE_INTERVAL: Optional[PositiveInt] = None


class HomeGasPriceConfig(BaseSettings):
    HOME_RPC_URL: Optional[str] = None
    HOME_BRIDGE_ADDRESS: Optional[str] = None
    HOME_GAS_PRICE_ORACLE_URL: Optional[str] = None
    HOME_GAS_PRICE_SPEED_TYPE: str = 'standard'
    HOME_GAS_PRICE_FACTOR: float = 1
    HOME_GAS_PRICE_FALLBACK: str = DEFAULT_GAS_PRICE_FALLBACK
    HOME_GAS_PRICE_UPDATE_INTERVAL: Optional[PositiveInt] = None


class ForeignGasPriceConfig(BaseSettings):
    FOREIGN_RPC_URL: Optional[str] = None
    FOREIGN_BRIDGE_ADDRESS: Optional[str] = None
    FOREIGN_GAS_PRICE_ORACLE_URL: Optional[str] = None
    FOREIGN_GAS_PRICE_SPEED_TYPE: str = 'standard'
    FOREIGN_GAS_PRICE_FACTOR: float = 1
    FOREIGN_GAS_PRICE_FALLBACK: str = DEFAULT_GAS_PRICE_FALLBACK
    FOREIGN_GAS_PRICE_UPDATE_INTERVAL: Optional[PositiveInt] = None
