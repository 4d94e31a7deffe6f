"""User storage: the DAO interface and a thread-safe in-memory implementation."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from userservice.config import InMemory
from userservice.model import User, UserDAOError, UserFields

_BAD_REQUEST = 400
_NOT_FOUND = 404


class UserDAO(ABC):
    """Operations on stored users; failures raise :class:`UserDAOError`."""

    @abstractmethod
    def list(self) -> list[User]:
        """All stored users."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User:
        """The user with this id."""

    @abstractmethod
    def create(self, fields: UserFields) -> User:
        """Store a new user with these fields and return it."""

    @abstractmethod
    def update(self, user: User) -> User:
        """Replace the stored user that has the same id."""

    @abstractmethod
    def delete_by_id(self, user_id: int) -> User:
        """Remove the user with this id and return it."""


class UserInMemoryDAO(UserDAO):
    """Users kept in a list guarded by a lock."""

    def __init__(self, cfg: InMemory | None = None) -> None:
        count = cfg.users if cfg is not None else 0
        self._users: list[User] = [
            User(index, UserFields(f"User{index}")) for index in range(1, count + 1)
        ]
        self._lock = threading.Lock()

    @staticmethod
    def validate_fields(fields: UserFields) -> None:
        """Raise :class:`UserDAOError` when the fields fail validation."""
        errors = fields.validate()
        if errors:
            raise UserDAOError.from_validation_errors(errors)

    def list(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def find_by_id(self, user_id: int) -> User:
        with self._lock:
            found = next((user for user in self._users if user.id == user_id), None)
        if found is None:
            raise UserDAOError("User not found", _NOT_FOUND)
        return found

    def create(self, fields: UserFields) -> User:
        self.validate_fields(fields)
        with self._lock:
            if any(user.fields == fields for user in self._users):
                raise UserDAOError("User exists", _BAD_REQUEST)
            new_id = max((user.id for user in self._users), default=0) + 1
            user = User(new_id, fields)
            self._users.append(user)
            return user

    def _index_of(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise UserDAOError("User not found", _BAD_REQUEST)

    def update(self, user: User) -> User:
        self.validate_fields(user.fields)
        with self._lock:
            del self._users[self._index_of(user.id)]
            self._users.append(user)
            return user

    def delete_by_id(self, user_id: int) -> User:
        with self._lock:
            return self._users.pop(self._index_of(user_id))