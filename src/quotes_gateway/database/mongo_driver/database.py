from pymongo import MongoClient

from ..database import Database
from .user import MongoUserBackend


class MongoDatabase(Database):
    """
    MongoDB implementation of the Database interface.
    """
    _client: MongoClient = None
    _db_name = 'quotes-gateway'

    @property
    def db(self):
        """
        Get the MongoDB database instance.
        :return: The MongoDB database instance.
        """
        if self._client is None:
            raise ValueError('MongoDB client is not set. Call set_client() first.')
        return self._client[self._db_name]

    @property
    def users(self) -> MongoUserBackend:
        return MongoUserBackend(self.db)

    @classmethod
    def set_client(cls,
                   client: MongoClient,
                   db_name: str = 'quotes-gateway'
                   ):
        """
        Set the MongoDB client for the database.
        :param client: MongoClient instance.
        :param db_name: Name of the database to use.
        """
        cls._client = client
        cls._db_name = db_name
