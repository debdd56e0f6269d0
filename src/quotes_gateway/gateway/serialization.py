"""
Conversion between User entities and the flat records stored by backends.

Backends store booleans as the strings ``"1"`` and ``"0"``; nothing outside
this module should see that encoding.
"""
from quotes_gateway.etc.errors import RecordDecodingException
from quotes_gateway.model.user import User


TRUE_VALUE = '1'
FALSE_VALUE = '0'
REQUIRED_FIELDS = ('nickname', 'email', 'auth_key')


def encode_bool(value: bool) -> str:
    return TRUE_VALUE if value else FALSE_VALUE


def decode_bool(value) -> bool:
    """
    Reverse ``encode_bool``, tolerating native booleans and missing values
    :param value: The stored value
    :return: The boolean it represents
    :raises RecordDecodingException: If the value is not a known encoding
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if value == TRUE_VALUE:
        return True
    if value == FALSE_VALUE:
        return False

    raise RecordDecodingException(f'Invalid boolean value in record: {value!r}')


def user_to_record(user: User) -> dict:
    record = {
        'nickname': user.nickname,
        'email': user.email,
        'auth_key': user.auth_key,
        'login_count': user.login_count,
        'last_login_time': user.last_login_time,
        'last_login_address': user.last_login_address,
        'terms': encode_bool(user.terms_accepted),
        'favorites': list(user.favorites),
        'added': list(user.added),
    }

    if user.uid:
        record['uid'] = user.uid

    return record


def record_to_user(record: dict) -> User:
    """
    Build a User from a stored record
    :param record: The record returned by a backend
    :return: The decoded user
    :raises RecordDecodingException: If a required field is missing
    """
    missing = [f for f in REQUIRED_FIELDS if f not in record]
    if missing:
        raise RecordDecodingException(
            f'Record {record.get("uid")!r} is missing fields: {", ".join(missing)}'
        )

    return User(
        nickname=record['nickname'],
        email=record['email'],
        auth_key=record['auth_key'],
        uid=record.get('uid'),
        login_count=record.get('login_count') or 0,
        last_login_time=record.get('last_login_time'),
        last_login_address=record.get('last_login_address'),
        terms_accepted=decode_bool(record.get('terms')),
        favorites=record.get('favorites'),
        added=record.get('added'),
    )
