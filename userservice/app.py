"""HTTP application exposing the user store as a small REST service."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from flask import Flask, jsonify, request

from userservice.config import ConfigError, Configuration, Store
from userservice.model import User, UserDAOError, UserFields
from userservice.services import UserDAO, UserInMemoryDAO

_BAD_REQUEST = 400
_DEFAULT_CONFIG = "application.yaml"


def create_dao(store: Store | None) -> UserDAO:
    """Build the user store described by the configuration's store section."""
    inmemory = store.inmemory if store is not None else None
    return UserInMemoryDAO(inmemory)


def _read_fields() -> UserFields:
    """The user fields carried by the JSON body of the current request."""
    data: Any = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise UserDAOError("Json deserialize error: expected a JSON object body", _BAD_REQUEST)
    if "name" not in data:
        raise UserDAOError("Json deserialize error: missing field `name`", _BAD_REQUEST)
    name = data["name"]
    if not isinstance(name, str):
        raise UserDAOError(
            "Json deserialize error: invalid type for field `name`, expected a string",
            _BAD_REQUEST,
        )
    return UserFields(name)


def create_app(dao: UserDAO) -> Flask:
    """Build the web application serving the given user store."""
    app = Flask(__name__)

    @app.errorhandler(UserDAOError)
    def _dao_error(err: UserDAOError):
        return jsonify(err.to_dict()), err.status

    @app.get("/users")
    def users_list():
        return jsonify([user.to_dict() for user in dao.list()])

    @app.get("/users/<int:user_id>")
    def get_user_by_id(user_id: int):
        return jsonify(dao.find_by_id(user_id).to_dict())

    @app.post("/users")
    def create_user():
        return jsonify(dao.create(_read_fields()).to_dict())

    @app.post("/users/<int:user_id>")
    def update_user(user_id: int):
        user = User(user_id, _read_fields())
        return jsonify(dao.update(user).to_dict())

    @app.delete("/users/<int:user_id>")
    def delete_user(user_id: int):
        return jsonify(dao.delete_by_id(user_id).to_dict())

    return app


def main(argv: list[str] | None = None) -> int:
    """Load the configuration and serve the user API."""
    parser = argparse.ArgumentParser(description="Serve the users REST API.")
    parser.add_argument(
        "--config",
        default=_DEFAULT_CONFIG,
        help="configuration file (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    try:
        cfg = Configuration.load_from_file(args.config)
    except ConfigError as err:
        print(f"Load config error: {err}", file=sys.stderr)
        return 1

    dao = create_dao(cfg.store or Store())
    app = create_app(dao)
    app.run(host=cfg.server.host, port=cfg.server.port)
    return 0