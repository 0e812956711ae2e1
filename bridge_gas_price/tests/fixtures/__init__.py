from bridge_gas_price.tests.fixtures.gas_price import *  # noqa: F401, F403
