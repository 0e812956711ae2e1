from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from bridge_gas_price.config.gas_price import (
    ChainGasPriceConfig,
    ForeignGasPriceConfig,
    HomeGasPriceConfig,
)
from bridge_gas_price.config.logger import LoggerConfig
from bridge_gas_price.models.gas_models import ChainSide


class Config(
    LoggerConfig, HomeGasPriceConfig, ForeignGasPriceConfig, BaseSettings
):
    SERVER_HOST: str = 'localhost'
    SERVER_PORT: int = 8000
    RELOAD: bool = False
    VERSION: str = '0.0.1'
    WEB3_TIMEOUT: int = 10
    ORACLE_TIMEOUT: int = 10
    PROXY_URL: Optional[str] = None
    CORS_ORIGINS: list = ['*']
    CORS_CREDENTIALS: bool = True
    CORS_METHODS: list = ['*']
    CORS_HEADERS: list = ['*']
    WORKERS_COUNT: int = 1

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    def get_chain_config(self, side: str) -> ChainGasPriceConfig:
        """
        Collects the `HOME_*` or `FOREIGN_*` settings of one chain side
        into an unprefixed ChainGasPriceConfig.
        """
        prefix = f'{ChainSide(side).value.upper()}_'
        values = {
            name[len(prefix):]: getattr(self, name)
            for name in type(self).model_fields
            if name.startswith(prefix)
        }
        return ChainGasPriceConfig(**values)
