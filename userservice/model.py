"""User records, their validation and the DAO error type."""

from __future__ import annotations

import json
import re
import unicodedata
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

_NAME_PATTERN = re.compile(r"[A-Z][a-zA-Z\d_]+")
_NAME_MIN_LENGTH = 4
_NAME_MAX_LENGTH = 255
_BAD_REQUEST = 400


@dataclass(frozen=True)
class UserFields:
    """The editable fields of a user."""

    name: str

    def validate(self) -> dict[str, list[str]]:
        """Failed check codes per field; an empty mapping means the fields are valid."""
        codes: list[str] = []
        if not _NAME_MIN_LENGTH <= len(self.name) <= _NAME_MAX_LENGTH:
            codes.append("length")
        if any(unicodedata.category(char) == "Cc" for char in self.name):
            codes.append("non_control_character")
        if _NAME_PATTERN.fullmatch(self.name) is None:
            codes.append("regex")
        return {"name": codes} if codes else {}

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class User:
    """A stored user: an id and its fields, flattened together when serialised."""

    id: int
    fields: UserFields

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.fields.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object for a user, got {type(data).__name__}")
        try:
            user_id = data["id"]
            name = data["name"]
        except KeyError as err:
            raise ValueError(f"missing field {err.args[0]!r}") from err
        if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id < 0:
            raise ValueError(f"invalid user id {user_id!r}")
        if not isinstance(name, str):
            raise ValueError(f"invalid user name {name!r}")
        return cls(user_id, UserFields(name))

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> User:
        return cls.from_dict(json.loads(text))


def users_to_json(users: Iterable[User]) -> str:
    """Serialise users as a compact JSON array."""
    return json.dumps(
        [user.to_dict() for user in users], separators=(",", ":"), ensure_ascii=False
    )


def users_from_json(text: str) -> list[User]:
    """Read users from a JSON array."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"expected an array of users, got {type(data).__name__}")
    return [User.from_dict(item) for item in data]


class UserDAOError(Exception):
    """A failed user operation, with the HTTP status it maps to."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message, status)
        self.message = message
        self.status = status

    @classmethod
    def from_validation_errors(cls, errors: Mapping[str, Sequence[str]]) -> UserDAOError:
        details = "# ".join(
            f"field: '{field}' errors: '{', '.join(codes)}'" for field, codes in errors.items()
        )
        return cls(f"Validation failed for: {details}", _BAD_REQUEST)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}

    def __str__(self) -> str:
        return f"UserDAO error {self.message}"

    def __repr__(self) -> str:
        return f"UserDAOError(message={self.message!r}, status={self.status!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserDAOError):
            return NotImplemented
        return (self.message, self.status) == (other.message, other.status)

    def __hash__(self) -> int:
        return hash((self.message, self.status))