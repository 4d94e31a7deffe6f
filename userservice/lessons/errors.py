"""User lookups that report failures with exceptions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: int
    name: str


class FindUserError(Exception):
    """Raised when the user store refuses a lookup."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"FindUserError(message: {self.message})"


class CommonError(Exception):
    """A lookup failure described by a single message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UserLookupError(Exception):
    """Base of the typed lookup failures."""


class FindFailedError(UserLookupError):
    """The underlying lookup failed; the original error is the cause."""

    def __init__(self, error: FindUserError) -> None:
        super().__init__(str(error))
        self.error = error

    def __str__(self) -> str:
        return str(self.error)


class UserNotExistsError(UserLookupError):
    """No user has the requested id."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class AccessDeniedError(UserLookupError):
    """The user exists but may not be read."""

    def __str__(self) -> str:
        return "Access denied"


_DENIED_ID = 11


def _check_id(uid: int) -> None:
    if uid < 0:
        raise ValueError(f"user id must not be negative, got {uid}")


def find_user(uid: int) -> User | None:
    """Look a user up: ids below 10 fail, 10 to 19 exist, the rest are absent."""
    _check_id(uid)
    if uid < 10:
        raise FindUserError(f"Find user error. User id {uid}")
    if 10 <= uid < 20:
        return User(uid, f"user name {uid}")
    return None


def _checked(user: User | None) -> User:
    if user is None:
        raise CommonError("User not found")
    if user.id == _DENIED_ID:
        raise CommonError("Access denied")
    return user


def find_user2(uid: int) -> User:
    """Find a user, turning every failure into :class:`CommonError`."""
    try:
        user = find_user(uid)
    except FindUserError as err:
        raise CommonError(err.message) from err
    return _checked(user)


def find_user3(uid: int) -> User:
    """Same as :func:`find_user2`."""
    try:
        return _checked(find_user(uid))
    except FindUserError as err:
        raise CommonError(err.message) from err


def e_find_user(uid: int) -> User | None:
    """Look a user up with the same rules as :func:`find_user`."""
    return find_user(uid)


def e_find_user2(uid: int) -> User:
    """Find a user, raising a typed :class:`UserLookupError` on failure."""
    try:
        user = e_find_user(uid)
    except FindUserError as err:
        raise FindFailedError(err) from err
    if user is None:
        raise UserNotExistsError(f"User with id {uid} not found")
    if user.id == _DENIED_ID:
        raise AccessDeniedError()
    return user


def _describe(uid: int) -> str:
    try:
        return repr(find_user(uid))
    except FindUserError as err:
        return f"Err({err!r})"


def main(argv: list[str] | None = None) -> int:
    for uid in (1, 10, 30):
        print(_describe(uid))

    try:
        fallback = find_user(1)
    except FindUserError:
        fallback = None
    print(fallback)

    try:
        print(f"user1 was found: {find_user(1)}")
    except FindUserError as err:
        print(f"user1 not found. The error is {err!r}")

    try:
        find_user(2)
    except FindUserError as err:
        print("Error")
        print(f"Error {err!r}")

    found = find_user(11)
    if found is not None:
        print("User was found")
        print(f"{found.name!r} was found")

    for finder in (find_user2, find_user3):
        try:
            print(finder(11))
        except CommonError as err:
            print(f"Err({err!r})")

    for uid in (1, 11, 20):
        try:
            e_find_user2(uid)
        except UserLookupError as err:
            print(f"{err}. Source: {err.__cause__!r}")
    return 0