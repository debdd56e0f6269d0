from quotes_gateway.etc.consts import SERVICE_CONFIG, LOGGER
from quotes_gateway.etc.errors import ConfigurationParsingException
from quotes_gateway.model.user import UserBackend


class Database:
    @property
    def users(self) -> UserBackend:
        """
        Get the user backend for managing user records in the database.
        :return: UserBackend instance.
        """
        raise NotImplementedError


_active_db: Database | None = None


def get_active_db() -> Database:
    """
    Return the active database set by configuration
    :return: Database instance based on the configuration.
    """
    global _active_db

    if _active_db is not None:
        return _active_db

    LOGGER.debug('Initialising %s database driver', SERVICE_CONFIG.database_driver)

    if SERVICE_CONFIG.database_driver == 'mongo':
        from pymongo import MongoClient
        from .mongo_driver import MongoDatabase

        mongo_client = MongoClient(
            host=SERVICE_CONFIG.mongodb_host,
            port=SERVICE_CONFIG.mongodb_port,
            tz_aware=True,
        )
        MongoDatabase.set_client(
            client=mongo_client,
            db_name=SERVICE_CONFIG.mongodb_db_name,
        )

        _active_db = MongoDatabase()

        return _active_db
    elif SERVICE_CONFIG.database_driver == 'redis':
        import redis
        from .redis_driver import RedisDatabase

        redis_client = redis.Redis(
            host=SERVICE_CONFIG.redis_host,
            port=SERVICE_CONFIG.redis_port,
            db=SERVICE_CONFIG.redis_db,
            decode_responses=True,
        )
        RedisDatabase.set_client(
            client=redis_client,
            key_prefix=SERVICE_CONFIG.redis_key_prefix,
        )

        _active_db = RedisDatabase()

        return _active_db
    elif SERVICE_CONFIG.database_driver == 'memory':
        from .memory import MemoryDatabase

        _active_db = MemoryDatabase()

        return _active_db
    else:
        raise ConfigurationParsingException(
            f'Unsupported database driver: {SERVICE_CONFIG.database_driver}'
        )


def reset_active_db() -> None:
    """
    Drop the cached database so the next call re-reads the configuration.
    """
    global _active_db

    _active_db = None


def get_user_gateway():
    """
    Build a user gateway backed by the active database.
    :return: UserGateway instance.
    """
    from quotes_gateway.gateway import UserGateway

    return UserGateway(get_active_db().users)
