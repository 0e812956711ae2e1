import pytest

from bridge_gas_price.config import Config
from bridge_gas_price.models.gas_models import ChainSide
from bridge_gas_price.services.gas_price_fetcher import GasPriceFetcher
from bridge_gas_price.services.gas_price_service import GasPriceService
from bridge_gas_price.tests.fixtures import *  # noqa: F401, F403

ORACLE_URL = 'https://gasprice.poa.network/'


@pytest.fixture()
def config() -> Config:
    return Config(
        _env_file=None,
        HOME_GAS_PRICE_ORACLE_URL=ORACLE_URL,
        HOME_GAS_PRICE_UPDATE_INTERVAL=None,
        HOME_GAS_PRICE_FALLBACK='1000000000',
        FOREIGN_GAS_PRICE_ORACLE_URL=ORACLE_URL,
        FOREIGN_GAS_PRICE_UPDATE_INTERVAL=None,
        FOREIGN_GAS_PRICE_FALLBACK='2000000000',
    )


@pytest.fixture()
def fetcher(oracle_client, bridge_contract) -> GasPriceFetcher:
    return GasPriceFetcher(
        oracle_client=oracle_client,
        bridge_contracts={
            ChainSide.HOME: bridge_contract,
            ChainSide.FOREIGN: bridge_contract,
        },
    )


@pytest.fixture()
def gas_price_service(config, fetcher) -> GasPriceService:
    return GasPriceService(config=config, fetcher=fetcher)
