from time import time
from typing import Optional

from fastapi import Depends, Path, Query
from fastapi.routing import APIRouter

from bridge_gas_price.models.gas_models import ChainSide, GasPriceOption, GasPriceResponse
from bridge_gas_price.rest_api import dependencies
from bridge_gas_price.services.gas_price_options import resolve_gas_price
from bridge_gas_price.services.gas_price_service import GasPriceService

gas_routes = APIRouter()


@gas_routes.get('/{side}', response_model=GasPriceResponse)
@gas_routes.get('/{side}/', include_in_schema=False)
async def get_gas_price(
    side: ChainSide = Path(..., description='Bridge side: home or foreign'),
    type: Optional[str] = Query(None, description='Option type: gasPrice or speed'),
    value: Optional[str] = Query(None, description='Gas price in wei or speed tier name'),
    gas_price_service: GasPriceService = Depends(dependencies.gas_price_service),
) -> GasPriceResponse:
    """
    Returns the gas price the relayer would use for the next transaction on the given side.
    Without options this is the cached price. speed_tiers is null unless the last
    refresh got an oracle response.
    """
    state = gas_price_service.get_state(side)
    option = GasPriceOption(type=type, value=value)
    return GasPriceResponse(
        side=side,
        gas_price=resolve_gas_price(option, state.price, state.speed_tiers),
        speed_tiers=state.speed_tiers,
        timestamp=int(time()),
    )
