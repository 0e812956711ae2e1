from bridge_gas_price.models.gas_models import ChainSide
from bridge_gas_price.utils.errors import UnknownChainSideError


def to_chain_side(side) -> ChainSide:
    try:
        return ChainSide(side)
    except ValueError:
        raise UnknownChainSideError(str(side), f"Unrecognized chain side '{side}'") from None
