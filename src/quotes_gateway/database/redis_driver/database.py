import redis

from ..database import Database
from .user import RedisUserBackend


class RedisDatabase(Database):
    """
    Redis implementation of the Database interface.
    """
    _client: redis.Redis | None = None
    _key_prefix = 'quotes'

    @property
    def client(self) -> redis.Redis:
        """
        Get the Redis client instance.
        :return: The Redis client instance.
        """
        if self._client is None:
            raise ValueError('Redis client is not set. Call set_client() first.')
        return self._client

    @property
    def users(self) -> RedisUserBackend:
        return RedisUserBackend(self.client, self._key_prefix)

    @classmethod
    def set_client(cls,
                   client: redis.Redis,
                   key_prefix: str = 'quotes',
                   ):
        """
        Set the Redis client for the database.
        :param client: Redis client instance, created with decode_responses=True.
        :param key_prefix: Prefix prepended to every key.
        """
        cls._client = client
        cls._key_prefix = key_prefix
