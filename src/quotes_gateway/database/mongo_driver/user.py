import uuid
from pymongo import ASCENDING
from pymongo.database import Database

from quotes_gateway.model.user import UserBackend


class MongoUserBackend(UserBackend):
    """
    MongoDB implementation of the UserBackend interface.

    BSON keeps datetimes to the millisecond, in UTC. The client should be
    created with tz_aware=True so they come back timezone aware.
    """
    def __init__(self, db: Database):
        """
        Initialise the MongoUserBackend with a MongoDB database instance.
        :param db: MongoDB database instance.
        """
        self.db = db
        self.collection = db['users']

    def insert(self, record: dict) -> str:
        uid = uuid.uuid4().hex

        # insert_one adds '_id' to the document it is given
        self.collection.insert_one({**record, 'uid': uid})

        return uid

    def get(self, uid: str) -> dict | None:
        return self.collection.find_one({'uid': uid}, {'_id': 0})

    def fetch(self, nickname: str) -> dict | None:
        return self.collection.find_one({'nickname': nickname}, {'_id': 0})

    def update(self, record: dict) -> None:
        self.collection.replace_one(
            {'uid': record['uid']},
            dict(record),
        )

    def all(self) -> list[dict]:
        cursor = self.collection.find({}, {'_id': 0}).sort('_id', ASCENDING)

        return list(cursor)

    def delete(self, uid: str) -> None:
        self.collection.delete_one({'uid': uid})
