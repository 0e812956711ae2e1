import uvicorn

from bridge_gas_price.config import Config
from bridge_gas_price.rest_api.create_app import create_app

config = Config()
app = create_app(config)


def main() -> None:
    """Entrypoint of the application."""
    uvicorn.run(
        "bridge_gas_price.__main__:app",
        workers=config.WORKERS_COUNT,
        host=config.SERVER_HOST,
        port=config.SERVER_PORT,
        reload=config.RELOAD,
        log_level=config.LOGGING_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
