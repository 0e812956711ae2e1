import fastapi
from pydantic import BaseModel, ConfigDict

from bridge_gas_price.config import Config
from bridge_gas_price.services.gas_price_service import GasPriceService


class Dependencies(BaseModel):
    """
    Holds the dependencies that should exist for the lifetime of the application.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='forbid', frozen=True)

    config: Config
    gas_price_service: GasPriceService

    def register(self, app: fastapi.FastAPI):
        """
        Registers itself in the application.
        """
        app.state.dependencies = self


def _get(request: fastapi.Request) -> Dependencies:
    return request.app.state.dependencies


def config(request: fastapi.Request) -> Config:
    return _get(request).config


def gas_price_service(request: fastapi.Request) -> GasPriceService:
    return _get(request).gas_price_service
