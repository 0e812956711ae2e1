from bridge_gas_price.models.gas_models import ChainSide, GasPriceState


class GasPriceStore:
    """
    Holds the current GasPriceState of one chain side.
    The state is frozen and only ever swapped as a whole, so a reader
    never sees a price from one refresh with tiers from another.
    """

    def __init__(self, side: ChainSide, initial_price: str):
        self.side = side
        self._state = GasPriceState(price=initial_price, speed_tiers=None)

    def snapshot(self) -> GasPriceState:
        return self._state

    def replace(self, state: GasPriceState) -> None:
        self._state = state
