import pytest
from pydantic import ValidationError

from bridge_gas_price.config import Config
from bridge_gas_price.config.gas_price import DEFAULT_GAS_PRICE_FALLBACK


def test_chain_config_reads_side_prefixed_env(monkeypatch):
    monkeypatch.setenv('HOME_GAS_PRICE_UPDATE_INTERVAL', '15000')
    monkeypatch.setenv('HOME_GAS_PRICE_SPEED_TYPE', 'fast')
    monkeypatch.delenv('FOREIGN_GAS_PRICE_UPDATE_INTERVAL', raising=False)
    monkeypatch.delenv('FOREIGN_GAS_PRICE_FALLBACK', raising=False)

    config = Config(_env_file=None)

    home = config.get_chain_config('home')
    foreign = config.get_chain_config('foreign')
    assert home.GAS_PRICE_UPDATE_INTERVAL == 15000
    assert home.GAS_PRICE_SPEED_TYPE == 'fast'
    assert foreign.GAS_PRICE_UPDATE_INTERVAL is None
    assert foreign.GAS_PRICE_FALLBACK == DEFAULT_GAS_PRICE_FALLBACK


@pytest.mark.parametrize('interval', ['0', '-15000'])
def test_update_interval_must_be_positive(interval, monkeypatch):
    monkeypatch.setenv('FOREIGN_GAS_PRICE_UPDATE_INTERVAL', interval)

    with pytest.raises(ValidationError):
        Config(_env_file=None)
