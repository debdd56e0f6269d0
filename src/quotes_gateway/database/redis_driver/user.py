import json
import uuid
from datetime import datetime
import redis

from quotes_gateway.model.user import UserBackend


_DATETIME_TAG = '__datetime__'


def _encode_value(value):
    if isinstance(value, datetime):
        return {_DATETIME_TAG: value.isoformat()}

    raise TypeError(f'Object of type {type(value).__name__} is not JSON serializable')


def _decode_object(payload: dict):
    if set(payload) == {_DATETIME_TAG}:
        return datetime.fromisoformat(payload[_DATETIME_TAG])

    return payload


def dump_record(record: dict) -> str:
    return json.dumps(record, default=_encode_value)


def load_record(data: str | None) -> dict | None:
    if data is None:
        return None

    return json.loads(data, object_hook=_decode_object)


class RedisUserBackend(UserBackend):
    """
    Redis implementation of the UserBackend interface.

    Each record is a JSON string under ``<prefix>:user:<uid>``. The list
    ``<prefix>:users`` keeps insertion order, and
    ``<prefix>:user:nickname:<nickname>`` maps a nickname to its uid.
    """
    def __init__(self,
                 client: redis.Redis,
                 key_prefix: str = 'quotes',
                 ):
        """
        Initialise the RedisUserBackend with a Redis client.
        :param client: Redis client, created with decode_responses=True.
        :param key_prefix: Prefix prepended to every key.
        """
        self.client = client
        self.key_prefix = key_prefix

    def _record_key(self, uid: str) -> str:
        return f'{self.key_prefix}:user:{uid}'

    def _nickname_key(self, nickname: str) -> str:
        return f'{self.key_prefix}:user:nickname:{nickname}'

    @property
    def _order_key(self) -> str:
        return f'{self.key_prefix}:users'

    def _release_nickname(self, pipe, nickname: str | None, uid: str) -> None:
        # the index may already belong to another user
        if nickname is not None and self.client.get(self._nickname_key(nickname)) == uid:
            pipe.delete(self._nickname_key(nickname))

    def insert(self, record: dict) -> str:
        uid = uuid.uuid4().hex
        stored = {**record, 'uid': uid}

        pipe = self.client.pipeline()
        pipe.set(self._record_key(uid), dump_record(stored))
        pipe.rpush(self._order_key, uid)
        if stored.get('nickname') is not None:
            pipe.set(self._nickname_key(stored['nickname']), uid)
        pipe.execute()

        return uid

    def get(self, uid: str) -> dict | None:
        return load_record(self.client.get(self._record_key(uid)))

    def fetch(self, nickname: str) -> dict | None:
        uid = self.client.get(self._nickname_key(nickname))

        if uid is None:
            return None

        return self.get(uid)

    def update(self, record: dict) -> None:
        uid = record['uid']
        previous = self.get(uid)

        pipe = self.client.pipeline()
        if previous and previous.get('nickname') != record.get('nickname'):
            self._release_nickname(pipe, previous.get('nickname'), uid)
        pipe.set(self._record_key(uid), dump_record(record))
        if record.get('nickname') is not None:
            pipe.set(self._nickname_key(record['nickname']), uid)
        pipe.execute()

    def all(self) -> list[dict]:
        uids = self.client.lrange(self._order_key, 0, -1)

        if not uids:
            return []

        payloads = self.client.mget([self._record_key(uid) for uid in uids])

        return [load_record(p) for p in payloads if p is not None]

    def delete(self, uid: str) -> None:
        previous = self.get(uid)

        pipe = self.client.pipeline()
        if previous:
            self._release_nickname(pipe, previous.get('nickname'), uid)
        pipe.delete(self._record_key(uid))
        pipe.lrem(self._order_key, 0, uid)
        pipe.execute()
