from datetime import datetime


class User:
    """
    A user of the quotes service, as seen by the domain.

    The gateway owns persistence, so this class carries data only.
    """
    def __init__(self,
                 nickname: str,
                 email: str,
                 auth_key: str,
                 uid: str | None = None,
                 login_count: int = 0,
                 last_login_time: datetime | None = None,
                 last_login_address: str | None = None,
                 terms_accepted: bool = False,
                 favorites: list[str] | None = None,
                 added: list[str] | None = None,
                 ):
        """
        A user of the quotes service, as seen by the domain.
        :param nickname: Unique display name chosen by the user
        :param email: Contact email address
        :param auth_key: Key used to authenticate the user
        :param uid: Identifier assigned by the storage backend, None until persisted
        :param login_count: Number of successful logins
        :param last_login_time: Time of the most recent login
        :param last_login_address: Address the most recent login came from
        :param terms_accepted: Whether the terms of service were accepted
        :param favorites: Quote IDs marked as favourite, duplicates are collapsed
        :param added: Quote IDs published by the user, in publishing order
        """
        self.nickname = nickname
        self.email = email
        self.auth_key = auth_key
        self.uid = uid
        self.login_count = login_count
        self.last_login_time = last_login_time
        self.last_login_address = last_login_address
        self.terms_accepted = terms_accepted
        self.favorites = list(dict.fromkeys(favorites or []))
        self.added = list(added or [])

    # mutable value object, not usable in sets or as a dict key
    __hash__ = None

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented

        return (
            self.uid == other.uid
            and self.nickname == other.nickname
            and self.email == other.email
            and self.auth_key == other.auth_key
            and self.login_count == other.login_count
            and self.last_login_time == other.last_login_time
            and self.last_login_address == other.last_login_address
            and self.terms_accepted == other.terms_accepted
            and set(self.favorites) == set(other.favorites)
            and self.added == other.added
        )

    def __repr__(self):
        return f'User(uid={self.uid!r}, nickname={self.nickname!r})'

    @property
    def has_accepted_terms(self) -> bool:
        """
        Whether the user has accepted the terms of service.
        """
        return bool(self.terms_accepted)


class UserBackend:
    """
    Abstract storage capability the user gateway depends on.

    Records are flat dictionaries. Implementations assign the ``uid`` field
    on insert and return copies, so callers never mutate stored state.
    """
    def insert(self, record: dict) -> str:
        """
        Store a new record.
        :param record: The record to store, without a uid.
        :return: The uid assigned to the record.
        """
        raise NotImplementedError

    def get(self, uid: str) -> dict | None:
        """
        Retrieve a record by its uid.
        :param uid: The uid of the record to retrieve.
        :return: The record or None if not found.
        """
        raise NotImplementedError

    def fetch(self, nickname: str) -> dict | None:
        """
        Retrieve a record by its nickname.
        :param nickname: The nickname of the record to retrieve.
        :return: The record or None if not found.
        """
        raise NotImplementedError

    def update(self, record: dict) -> None:
        """
        Replace the stored record sharing the same uid.
        :param record: The new record, carrying the uid to replace.
        :return: None
        """
        raise NotImplementedError

    def all(self) -> list[dict]:
        """
        Retrieve every stored record, in insertion order.
        :return: A list of records.
        """
        raise NotImplementedError

    def delete(self, uid: str) -> None:
        """
        Remove the record with the given uid.
        :param uid: The uid of the record to remove.
        :return: None
        """
        raise NotImplementedError
