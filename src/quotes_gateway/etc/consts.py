import logging
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


CONFIG_PATH = Path(__file__).resolve().parent.parent.parent.parent / 'conf'


class ServiceConfig(BaseSettings):
    """
    Configuration settings for the quotes user gateway.
    """
    model_config = SettingsConfigDict(
        env_prefix='QG_',
        env_file=CONFIG_PATH / '.env',
        env_file_encoding='utf-8',
    )

    application_name: str = Field(
        'quotes-gateway',
        description='Name of the application'
    )
    logging_level: str = Field(
        'INFO',
        description='Logging level for the application'
    )

    database_driver: str = Field(
        'memory',
        description='Storage backend to use for user records',
    )
    mongodb_host: str = Field(
        'localhost',
        description='Host for the MongoDB database',
    )
    mongodb_port: int = Field(
        27017,
        description='Port for the MongoDB database',
    )
    mongodb_db_name: str = Field(
        'quotes-gateway',
        description='Name of the MongoDB database to use',
    )

    redis_host: str = Field(
        'localhost',
        description='Host for the Redis store',
    )
    redis_port: int = Field(
        6379,
        description='Port for the Redis store',
    )
    redis_db: int = Field(
        0,
        description='Redis logical database index',
    )
    redis_key_prefix: str = Field(
        'quotes',
        description='Prefix prepended to every key written to Redis',
    )


SERVICE_CONFIG = ServiceConfig()        # type: ignore

LOGGER = logging.getLogger(SERVICE_CONFIG.application_name)
LOGGER.setLevel(SERVICE_CONFIG.logging_level.upper())

if not LOGGER.hasHandlers():
    console_handler = logging.StreamHandler()
    console_handler.setLevel(SERVICE_CONFIG.logging_level.upper())

    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s]: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )
    console_handler.setFormatter(formatter)

    LOGGER.addHandler(console_handler)

LOGGER.debug('Service configuration loaded: %s', SERVICE_CONFIG.model_dump_json(indent=2))
