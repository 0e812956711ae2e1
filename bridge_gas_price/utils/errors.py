from abc import abstractmethod

from bridge_gas_price.utils.logger import LogArgs


class SourceMistakes:
    error_owner = 'source'


class OperatorMistakes:
    error_owner = 'operator'


class OurMistakes:
    error_owner = 'relayer'


class BaseGasPriceError(Exception):
    """common error for gas price sources and options"""

    @property
    @abstractmethod
    def msg_to_log(self):
        ...

    @property
    @abstractmethod
    def error_owner(self):
        ...

    def __init__(self, chain_side: str, message: str = None, **kwargs):
        self.chain_side = chain_side
        self.message = message
        self.kwargs = kwargs

    def __str__(self):
        return f'{self.msg_to_log}. Chain side: {self.chain_side}'

    def __repr__(self):
        return f'{self.__class__.__name__}({self.chain_side}, {self.message}, {self.kwargs})'

    def to_dict(self):
        return {
            'chain_side': self.chain_side,
            'reason': self.message,
            'error_owner': self.error_owner,
            **self.kwargs,
        }

    def to_log_args(self):
        return (
            f'{self.msg_to_log}. Chain side: %({LogArgs.chain_side})s. Reason: %({LogArgs.ex})s',
            {LogArgs.chain_side: self.chain_side, LogArgs.ex: self.message},
        )


class OracleUnavailableError(SourceMistakes, BaseGasPriceError):
    """Gas price oracle request failed, the contract is asked next"""
    msg_to_log = 'Gas Price API is not available'


class ContractUnavailableError(SourceMistakes, BaseGasPriceError):
    """Bridge contract gasPrice() call failed after the oracle failed"""
    msg_to_log = 'There was a problem getting the gas price from the contract'


class TotalFetchFailureError(SourceMistakes, BaseGasPriceError):
    """No source returned a gas price in this refresh cycle"""
    msg_to_log = 'All gas price sources failed, keeping the cached gas price'


class OracleNotConfiguredError(OperatorMistakes, BaseGasPriceError):
    """No oracle url for the chain side"""
    msg_to_log = 'Gas price oracle url is not configured'


class OracleResponseError(SourceMistakes, BaseGasPriceError):
    """Oracle answered, but without a usable price for the configured speed type"""
    msg_to_log = 'Cannot parse gas price oracle response'


class InvalidGasPriceOptionError(OperatorMistakes, BaseGasPriceError):
    """Unknown option type or speed tier, the cached gas price is used instead"""
    msg_to_log = 'Invalid gas price option'


class UnknownChainSideError(OurMistakes, BaseGasPriceError):
    """Chain side is neither home nor foreign"""
    msg_to_log = 'Unrecognized chain side'
