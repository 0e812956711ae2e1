from pydantic_settings import BaseSettings


class LoggerConfig(BaseSettings):
    LOGGING_LEVEL: str = 'INFO'
    LOG_HANDLERS: list = ['console']
