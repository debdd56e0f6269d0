import uuid
from copy import deepcopy
from typing import Callable

from quotes_gateway.model.user import UserBackend


def _new_uid() -> str:
    return uuid.uuid4().hex


class MemoryUserBackend(UserBackend):
    """
    In-memory implementation of the UserBackend interface.
    """
    def __init__(self,
                 db: list | None = None,
                 id_factory: Callable[[], str] = _new_uid,
                 ):
        """
        Initialise the MemoryUserBackend with a list.
        :param db: A list of records to act as the in-memory database.
        :param id_factory: Callable producing the uid of each inserted record.
        """
        self.db = db if db is not None else []
        self.id_factory = id_factory

    def insert(self, record: dict) -> str:
        uid = self.id_factory()

        stored = deepcopy(record)
        stored['uid'] = uid
        self.db.append(stored)

        return uid

    def get(self, uid: str) -> dict | None:
        for record in self.db:
            if record['uid'] == uid:
                return deepcopy(record)

        return None

    def fetch(self, nickname: str) -> dict | None:
        for record in self.db:
            if record.get('nickname') == nickname:
                return deepcopy(record)

        return None

    def update(self, record: dict) -> None:
        for i, stored in enumerate(self.db):
            if stored['uid'] == record['uid']:
                self.db[i] = deepcopy(record)
                return

    def all(self) -> list[dict]:
        return deepcopy(self.db)

    def delete(self, uid: str) -> None:
        self.db[:] = [r for r in self.db if r['uid'] != uid]
