from quotes_gateway.etc.consts import LOGGER
from quotes_gateway.etc.errors import InvalidArgumentException, DuplicateEntityException, \
    NotFoundException
from quotes_gateway.model.user import User, UserBackend
from .serialization import user_to_record, record_to_user


class UserGateway:
    """
    Translates between User entities and backend records, and guards the
    invariants of the user store.

    The backend copy is the single source of truth: every query re-reads it
    and no entity passed in is retained after a call returns.
    """
    def __init__(self, backend: UserBackend):
        """
        Translates between User entities and backend records.
        :param backend: The storage backend holding user records
        """
        self.backend = backend

    @staticmethod
    def _ensure_user(user) -> None:
        if not isinstance(user, User):
            LOGGER.warning('Rejected value of type %s, expected a User', type(user).__name__)
            raise InvalidArgumentException(
                f'Expected a User entity, got {type(user).__name__}'
            )

    def _get_record(self, uid: str | None) -> dict:
        record = self.backend.get(uid) if uid else None

        if record is None:
            LOGGER.warning('No user record found for uid %s', uid)
            raise NotFoundException(f'User {uid} not found')

        return record

    def _ensure_nickname_free(self, nickname: str, uid: str | None = None) -> None:
        owner = self.backend.fetch(nickname)

        if owner is not None and owner.get('uid') != uid:
            LOGGER.warning('Nickname %s is already taken by user %s', nickname, owner.get('uid'))
            raise DuplicateEntityException(f'Nickname {nickname} is already taken')

    def add(self, user: User) -> str:
        """
        Persist a new user.

        Favourites and published quotes always start empty.
        :param user: The user to persist, without a uid
        :return: The uid assigned by the backend
        :raises InvalidArgumentException: If the value is not a User
        :raises DuplicateEntityException: If the user already carries a uid
        :raises DuplicateEntityException: If another user has the same nickname
        """
        self._ensure_user(user)

        if user.uid:
            LOGGER.warning('Refused to add user %s, already persisted', user.uid)
            raise DuplicateEntityException(f'User {user.uid} has already been persisted')

        self._ensure_nickname_free(user.nickname)

        record = user_to_record(user)
        record['favorites'] = []
        record['added'] = []

        uid = self.backend.insert(record)
        LOGGER.info('Added user %s with uid %s', user.nickname, uid)

        return uid

    def get(self, uid: str) -> User | None:
        record = self.backend.get(uid)

        return record_to_user(record) if record else None

    def fetch(self, nickname: str) -> User | None:
        record = self.backend.fetch(nickname)

        return record_to_user(record) if record else None

    def update(self, user: User) -> None:
        """
        Overwrite the stored record of a persisted user.
        :param user: The user with updated attributes
        :raises InvalidArgumentException: If the value is not a User
        :raises DuplicateEntityException: If another user has the same nickname
        :raises NotFoundException: If no record exists for the user's uid
        """
        self._ensure_user(user)
        self._get_record(user.uid)
        self._ensure_nickname_free(user.nickname, user.uid)

        self.backend.update(user_to_record(user))
        LOGGER.info('Updated user %s', user.uid)

    def publish_quote(self, uid: str, quote_uid) -> None:
        """
        Record that the user published a quote.
        :param uid: The uid of the user
        :param quote_uid: The uid of the published quote
        :raises NotFoundException: If no record exists for the uid
        """
        user = record_to_user(self._get_record(uid))
        user.added.append(quote_uid)

        self.backend.update(user_to_record(user))
        LOGGER.debug('User %s published quote %s', uid, quote_uid)

    def toggle_favorite(self, uid: str, quote_uid) -> None:
        """
        Add the quote to the user's favourites, or remove it if already there.
        :param uid: The uid of the user
        :param quote_uid: The uid of the quote
        :raises NotFoundException: If no record exists for the uid
        """
        user = record_to_user(self._get_record(uid))

        if quote_uid in user.favorites:
            user.favorites.remove(quote_uid)
            LOGGER.debug('Removed quote %s from favourites of user %s', quote_uid, uid)
        else:
            user.favorites.append(quote_uid)
            LOGGER.debug('Added quote %s to favourites of user %s', quote_uid, uid)

        self.backend.update(user_to_record(user))

    def all(self) -> list[User]:
        return [record_to_user(r) for r in self.backend.all()]

    def delete(self, uid: str) -> None:
        """
        Remove a persisted user.
        :param uid: The uid of the user to remove
        :raises NotFoundException: If no record exists for the uid
        """
        self._get_record(uid)

        self.backend.delete(uid)
        LOGGER.info('Deleted user %s', uid)
