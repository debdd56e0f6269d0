from ..database import Database
from .user import MemoryUserBackend


class MemoryDatabase(Database):
    """
    In-memory implementation of the Database interface.
    This is intended for development and testing purposes only.
    Do not use in production.
    """
    def __init__(self):
        self._users = []

    @property
    def users(self) -> MemoryUserBackend:
        return MemoryUserBackend(self._users)
