from pathlib import Path

import ujson
from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.contract import AsyncContract

from bridge_gas_price.config import Config
from bridge_gas_price.utils.logger import get_logger

BRIDGE_ABI_PATH = Path(__file__).parent / 'abi' / 'Bridge.json'

logger = get_logger(__name__)


class Web3Client:
    def __init__(self, uri: str, config: Config):
        self.w3 = AsyncWeb3(
            AsyncHTTPProvider(
                endpoint_uri=uri,
                request_kwargs={'timeout': ClientTimeout(total=config.WEB3_TIMEOUT)},
            ),
        )

        with open(BRIDGE_ABI_PATH) as fh:
            self.bridge_abi = ujson.load(fh)

    def get_bridge_contract(self, address: str) -> AsyncContract:
        """Bridge contract bound to `address`; exposes the `gasPrice()` view."""
        return self.w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(address),
            abi=self.bridge_abi,
        )
