import pytest
from starlette.testclient import TestClient

from bridge_gas_price.models.gas_models import ChainSide, GasPriceState
from bridge_gas_price.rest_api import dependencies
from bridge_gas_price.rest_api.create_app import create_app


@pytest.fixture()
def gas_client(config, gas_price_service) -> TestClient:
    app = create_app(config=config)
    dependencies.Dependencies(
        config=config,
        gas_price_service=gas_price_service,
    ).register(app)
    return TestClient(app)


def test_health_check(gas_client):
    response = gas_client.get('/health_check')
    assert response.status_code == 200
    assert response.text == 'OK'


def test_get_cached_gas_price(gas_client):
    response = gas_client.get('/v1/gas/home')
    assert response.status_code == 200
    response_data = response.json()
    assert response_data['side'] == 'home'
    assert response_data['gas_price'] == '1000000000'
    assert response_data['speed_tiers'] is None


def test_get_gas_price_for_speed(gas_client, gas_price_service, speed_tiers):
    gas_price_service.stores[ChainSide.FOREIGN].replace(
        GasPriceState(price='5000000000', speed_tiers=speed_tiers)
    )

    response = gas_client.get('/v1/gas/foreign', params={'type': 'speed', 'value': 'standard'})

    assert response.status_code == 200
    response_data = response.json()
    assert response_data['gas_price'] == '10640000000'
    assert response_data['speed_tiers']['standard'] == 10.64
    assert response_data['speed_tiers']['block_number'] == 6704240


def test_get_gas_price_unknown_side(gas_client):
    response = gas_client.get('/v1/gas/sidechain')
    assert response.status_code == 422
