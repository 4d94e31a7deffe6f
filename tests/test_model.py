import json

import pytest

from userservice.model import (
    User,
    UserDAOError,
    UserFields,
    users_from_json,
    users_to_json,
)


def test_serialize_user():
    assert User(1, UserFields("user")).to_json() == '{"id":1,"name":"user"}'


def test_serialize_users_list():
    users = [User(1, UserFields("user 1")), User(2, UserFields("user 2"))]
    assert (
        users_to_json(users)
        == '[{"id":1,"name":"user 1"},{"id":2,"name":"user 2"}]'
    )


def test_deserialize_user():
    assert User.from_json('{"id":1,"name":"user"}') == User(1, UserFields("user"))


def test_deserialize_users_list():
    text = '[{"id":1,"name":"user 1"},{"id":2,"name":"user 2"}]'
    assert users_from_json(text) == [
        User(1, UserFields("user 1")),
        User(2, UserFields("user 2")),
    ]


def test_user_round_trip():
    user = User(7, UserFields("Somebody"))
    assert User.from_json(user.to_json()) == user


def test_deserialize_ignores_unknown_fields():
    assert User.from_dict({"id": 3, "name": "Abcd", "extra": 1}) == User(3, UserFields("Abcd"))


@pytest.mark.parametrize(
    "text",
    [
        '{"name":"user"}',
        '{"id":1}',
        '{"id":-1,"name":"user"}',
        '{"id":"1","name":"user"}',
        '{"id":1,"name":5}',
        '[1, 2]',
        'not json',
    ],
)
def test_deserialize_invalid_user(text):
    with pytest.raises(ValueError):
        User.from_json(text)


def test_users_from_json_requires_array():
    with pytest.raises(ValueError):
        users_from_json('{"id":1,"name":"user"}')


@pytest.mark.parametrize("name", ["User", "User1", "Update_user", "Abc9"])
def test_valid_names(name):
    assert UserFields(name).validate() == {}


def test_empty_name_fails_length_and_regex():
    assert UserFields("").validate() == {"name": ["length", "regex"]}


def test_lowercase_name_fails_regex():
    assert UserFields("user").validate() == {"name": ["regex"]}


def test_too_long_name_fails_length():
    assert UserFields("A" + "b" * 255).validate() == {"name": ["length"]}


def test_control_character_fails():
    assert UserFields("Abc\tdef").validate() == {"name": ["non_control_character", "regex"]}


def test_trailing_newline_fails_regex():
    assert UserFields("Abcd\n").validate() == {"name": ["non_control_character", "regex"]}


def test_from_validation_errors_message():
    error = UserDAOError.from_validation_errors(UserFields("").validate())
    assert error == UserDAOError(
        "Validation failed for: field: 'name' errors: 'length, regex'", 400
    )


def test_from_validation_errors_joins_fields():
    error = UserDAOError.from_validation_errors({"name": ["length"], "other": ["regex"]})
    assert error.message == (
        "Validation failed for: field: 'name' errors: 'length'# field: 'other' errors: 'regex'"
    )
    assert error.status == 400


def test_dao_error_display_and_dict():
    error = UserDAOError("User not found", 404)
    assert str(error) == "UserDAO error User not found"
    assert error.to_dict() == {"error": "User not found"}
    assert json.dumps(error.to_dict()) == '{"error": "User not found"}'


def test_dao_error_equality():
    assert UserDAOError("User exists", 400) == UserDAOError("User exists", 400)
    assert UserDAOError("User exists", 400) != UserDAOError("User exists", 404)
    assert hash(UserDAOError("x", 400)) == hash(UserDAOError("x", 400))


def test_dao_error_is_raisable():
    error = UserDAOError("User not found", 404)
    assert error.message == "User not found"
    assert error.status == 404
    with pytest.raises(UserDAOError) as exc:
        raise error
    assert exc.value.status == 404
    assert str(exc.value) == "UserDAO error User not found"