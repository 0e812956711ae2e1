from contextvars import ContextVar
from logging import LoggerAdapter, getLogger
from logging.config import dictConfig
from typing import Optional
from uuid import uuid4

from bridge_gas_price.config.logger import LoggerConfig

CORRELATION_ID = "cid"
CHAIN_SIDE = "chain_side"
ERR = "err"  # error object log argument
ERR_TYPE = "err_type"  # error type log argument

# This field is keyword argument from <https://github.com/python/cpython/blob/3.10/Lib/logging/__init__.py#L1600>
#   and never changed.
EXTRA = "extra"

logger_config = LoggerConfig()

CONFIG = dict(
    # See: <https://docs.python.org/3.7/library/logging.config.html#logging.config.fileConfig>
    # and find `disable_existing_loggers`, it's same configuration parameter as for dictConfig function.
    disable_existing_loggers=False,
    version=1,
    formatters={
        'simple': {
            'format': '%(asctime)s - %(filename)s:%(lineno)s:%(funcName)s - %(levelname)s - %(message)s'
        },
    },
    handlers={
        'console': {
            'class': 'logging.StreamHandler',
            'level': logger_config.LOGGING_LEVEL,
            'formatter': 'simple',
            'stream': 'ext://sys.stdout'
        },
    },
    root={
        'handlers': logger_config.LOG_HANDLERS,
        'level': logger_config.LOGGING_LEVEL,
    },
)

correlation_id = ContextVar(CORRELATION_ID, default=uuid4().hex)


class CustomContextLogger(LoggerAdapter):

    def __init__(self, logger, extra):
        super(CustomContextLogger, self).__init__(logger, extra)

    def process(self, msg, kwargs):
        if EXTRA not in kwargs:
            kwargs[EXTRA] = dict(self.extra)
        else:
            kwargs[EXTRA].update(self.extra)

        # assigning a correlation key to all log messages
        kwargs[EXTRA][CORRELATION_ID] = self.get_correlation_id()

        if ERR in kwargs[EXTRA] and ERR_TYPE not in kwargs[EXTRA]:
            kwargs[EXTRA][ERR_TYPE] = type(kwargs[EXTRA][ERR]).__name__

        return msg, kwargs

    @staticmethod
    def get_correlation_id():
        return correlation_id.get()


class LogArgs:
    chain_side = CHAIN_SIDE  # "home" or "foreign"
    gas_price = "gas_price"  # wei
    gas_price_source = "gas_price_source"  # oracle or contract
    gas_price_option = "gas_price_option"
    update_interval = "update_interval"  # ms
    speed_type = "speed_type"
    ex = "ex"  # human readable exception description


def get_logger(name: str, extra: Optional[dict] = None, corr_id: Optional[str] = None) -> "CustomContextLogger":
    dictConfig(CONFIG)

    extra = extra or {}

    if corr_id:
        correlation_id.set(corr_id)

    logger = CustomContextLogger(getLogger(name), extra)
    return logger


def set_correlation_id(corr_id: str):
    correlation_id.set(corr_id)
