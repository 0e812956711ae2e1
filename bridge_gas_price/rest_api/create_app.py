from contextlib import asynccontextmanager
from typing import Dict, Optional

import pydantic
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from web3.contract import AsyncContract

from bridge_gas_price.clients.blockchain.web3_client import Web3Client
from bridge_gas_price.clients.gas_price_oracle import GasPriceOracleClient
from bridge_gas_price.config import Config
from bridge_gas_price.models.gas_models import ChainSide
from bridge_gas_price.rest_api import dependencies
from bridge_gas_price.rest_api.middlewares import RouteLoggerMiddleware
from bridge_gas_price.rest_api.routes.gas import gas_routes
from bridge_gas_price.services.gas_price_fetcher import GasPriceFetcher
from bridge_gas_price.services.gas_price_service import GasPriceService
from bridge_gas_price.utils.errors import BaseGasPriceError
from bridge_gas_price.utils.httputils import setup_client_session, teardown_client_session
from bridge_gas_price.utils.logger import LogArgs, get_logger

logger = get_logger(__name__)


def build_bridge_contracts(config: Config) -> Dict[ChainSide, Optional[AsyncContract]]:
    contracts = {}
    for side in ChainSide:
        chain_config = config.get_chain_config(side)
        if not chain_config.RPC_URL or not chain_config.BRIDGE_ADDRESS:
            log_args = {LogArgs.chain_side: side.value}
            logger.warning(
                f'No rpc url or bridge address for %({LogArgs.chain_side})s, '
                f'contract gas price fallback is disabled',
                log_args,
                extra=log_args,
            )
            contracts[side] = None
            continue
        web3_client = Web3Client(chain_config.RPC_URL, config)
        contracts[side] = web3_client.get_bridge_contract(chain_config.BRIDGE_ADDRESS)
    return contracts


def build_gas_price_service(config: Config) -> GasPriceService:
    fetcher = GasPriceFetcher(
        oracle_client=GasPriceOracleClient(config=config),
        bridge_contracts=build_bridge_contracts(config),
    )
    return GasPriceService(config=config, fetcher=fetcher)


@asynccontextmanager
async def lifespan(app: FastAPI):
    gas_price_service = app.state.dependencies.gas_price_service
    await setup_client_session()
    try:
        gas_price_service.start_all()
        yield
    finally:
        await gas_price_service.shutdown_all()
        await teardown_client_session()


def create_app(config: Config):
    app = FastAPI(
        title='Bridge Gas Price API',
        description=(
            """Keeps the gas price used by the bridge relayer up to date for both bridge sides.
            Prices come from the gas price oracle, the bridge contract when the oracle is down,
            or the last known value when both are down."""
        ),
        version=config.VERSION,
        docs_url='/',
        redoc_url='/docs',
        lifespan=lifespan,
    )

    # Setup and register dependencies.
    gas_price_service = build_gas_price_service(config)
    deps = dependencies.Dependencies(
        config=config,
        gas_price_service=gas_price_service,
    )
    deps.register(app)

    # Setup and register middlewares and routes.
    register_cors(app, config)
    register_route(app)
    register_route_logging(app)

    # Common RFC 5741 Exceptions handling, https://tools.ietf.org/html/rfc5741#section-2
    @app.exception_handler(Exception)
    async def http_exception_handler(request: Request, exc):
        exception_dict = {
            "type": "Internal Server Error",
            "title": exc.__class__.__name__,
            "instance": f"{config.SERVER_HOST}{request.url.path}",
            "detail": f"{exc.__class__.__name__} at {str(exc)} when executing {request.method} request",
        }
        logger.error(
            "Exception when %s: %s",
            exception_dict["instance"],
            exception_dict["detail"],
        )
        return JSONResponse(exception_dict, status_code=500)

    @app.exception_handler(pydantic.ValidationError)
    async def handle_validation_error(
        request: Request, exc: pydantic.ValidationError
    ):  # pylint: disable=unused-argument
        """
        Handles validation errors.
        """
        return JSONResponse({"message": exc.errors(include_url=False, include_context=False)}, status_code=422)

    @app.exception_handler(BaseGasPriceError)
    async def handle_gas_price_error(request: Request, exc: BaseGasPriceError):
        return JSONResponse({'error': str(exc), **exc.to_dict()}, status_code=400)

    @app.get("/health_check", include_in_schema=False)
    def health_check():
        """
        Health check
        ---
        tags:
            - util
        responses:
            200:
                description: Returns "OK"
        """
        return Response("OK")

    return app


def register_cors(app: FastAPI, config: Config):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_CREDENTIALS,
        allow_methods=config.CORS_METHODS,
        allow_headers=config.CORS_HEADERS,
    )


def register_route_logging(app: FastAPI):
    app.add_middleware(RouteLoggerMiddleware)


def register_route(app: FastAPI):
    app.include_router(gas_routes, prefix="/v1/gas", tags=["Gas"])
