from unittest.mock import AsyncMock

import pytest

from bridge_gas_price.models.gas_models import ChainSide
from bridge_gas_price.services.gas_price_fetcher import GasPriceFetcher
from bridge_gas_price.tests.fixtures import make_bridge_contract
from bridge_gas_price.utils.errors import UnknownChainSideError


@pytest.mark.asyncio()
async def test_fetch_gas_price_from_oracle_by_default(
    fetcher: GasPriceFetcher, bridge_contract, speed_tiers
):
    result = await fetcher.fetch(ChainSide.HOME)

    assert result.price == '1'
    assert result.speed_tiers is speed_tiers
    bridge_contract.functions.gasPrice.assert_not_called()


@pytest.mark.asyncio()
async def test_fetch_gas_price_from_contract_if_oracle_fails(
    fetcher: GasPriceFetcher, oracle_client, caplog
):
    oracle_client.get_price.side_effect = Exception('oracle failed')

    result = await fetcher.fetch(ChainSide.FOREIGN)

    assert result.price == '2'
    assert result.speed_tiers is None
    oracle_client.get_price.assert_awaited_once_with(ChainSide.FOREIGN)
    assert 'Gas Price API is not available' in caplog.text


@pytest.mark.asyncio()
async def test_fetch_returns_none_if_oracle_and_contract_fail(oracle_client, caplog):
    oracle_client.get_price.side_effect = Exception('oracle failed')
    contract_call = AsyncMock(side_effect=Exception('contract failed'))
    fetcher = GasPriceFetcher(
        oracle_client=oracle_client,
        bridge_contracts={ChainSide.HOME: make_bridge_contract(contract_call)},
    )

    result = await fetcher.fetch(ChainSide.HOME)

    assert result.price is None
    assert result.speed_tiers is None
    contract_call.assert_awaited_once()
    assert 'There was a problem getting the gas price from the contract' in caplog.text


@pytest.mark.asyncio()
async def test_fetch_without_bridge_contract(oracle_client):
    oracle_client.get_price.side_effect = Exception('oracle failed')
    fetcher = GasPriceFetcher(
        oracle_client=oracle_client,
        bridge_contracts={ChainSide.HOME: None},
    )

    result = await fetcher.fetch(ChainSide.HOME)

    assert result.price is None
    assert result.speed_tiers is None


@pytest.mark.asyncio()
async def test_fetch_normalizes_contract_gas_price(oracle_client):
    oracle_client.get_price.side_effect = Exception('oracle failed')
    fetcher = GasPriceFetcher(
        oracle_client=oracle_client,
        bridge_contracts={
            ChainSide.HOME: make_bridge_contract(AsyncMock(return_value=20000000000)),
        },
    )

    result = await fetcher.fetch('home')

    assert result.price == '20000000000'


@pytest.mark.asyncio()
async def test_fetch_unknown_chain_side(fetcher: GasPriceFetcher, oracle_client):
    with pytest.raises(UnknownChainSideError):
        await fetcher.fetch('sidechain')
    oracle_client.get_price.assert_not_awaited()
