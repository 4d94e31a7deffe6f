# userservice

A small HTTP service that keeps a list of users in memory and serves them
as JSON. It validates user names, reports errors as JSON and takes its
settings from a YAML (or JSON) file.

## Running the server

```
userservice
userservice --config path/to/settings.yaml
```

Without `--config` the server reads `application.yaml` from the current
directory. The file name may be given with or without its extension; a
name without one is tried with `.yaml`, `.yml` and `.json`. If the
configuration cannot be loaded, the command prints the error and exits
with status 1. Otherwise it serves the API on the configured host and port
with Flask's built-in server.

## Configuration

```yaml
server:
  host: 0.0.0.0
  port: 9090
store:
  inmemory:
    users: 10
```

- `server.host` defaults to `0.0.0.0` and `server.port` to `8080`; an
  empty file gives both defaults and no store.
- `store.inmemory.users` seeds the store with that many users, named
  `User1`, `User2`, and so on, with ids starting at 1. Without it the
  store starts empty.
- A missing file, malformed content, a `server` key with no body, or a
  port outside 0–65535 raises `ConfigError`.

## Endpoints

| Method | Path          | Body                 | Result                          |
|--------|---------------|----------------------|---------------------------------|
| GET    | `/users`      |                      | list of all users               |
| GET    | `/users/<id>` |                      | the user                        |
| POST   | `/users`      | `{"name": "User1"}`  | the new user with its id        |
| POST   | `/users/<id>` | `{"name": "User2"}`  | the updated user                |
| DELETE | `/users/<id>` |                      | the removed user                |

A user is returned as `{"id": 1, "name": "User1"}`. A new user gets the
highest id in the store plus one.

Errors come back as `{"error": "<message>"}`:

- `User not found` with status 404 when looking up an unknown id, and with
  status 400 when updating or deleting one;
- `User exists` with status 400 when creating a user whose name is taken;
- `Validation failed for: field: 'name' errors: '...'` with status 400 when
  the name breaks the rules below, listing the failed checks (`length`,
  `non_control_character`, `regex`);
- a `Json deserialize error: ...` message with status 400 when a POST body
  is not a JSON object with a string `name`.

A name must be 4 to 255 characters long, hold no control characters, start
with an upper-case ASCII letter and continue with letters, digits or
underscores.

## Using it as a library

- `userservice.model` holds `User`, `UserFields` and `UserDAOError`.
  `UserFields.validate()` returns the failed checks per field. Users convert
  to and from JSON with `User.to_json`, `User.from_json`, `users_to_json`
  and `users_from_json`.
- `userservice.config` loads a `Configuration` (with `ServerConfig`,
  `Store` and `InMemory`) through `Configuration.load_from_file`, raising
  `ConfigError` on failure.
- `userservice.services` provides the abstract `UserDAO` and the
  thread-safe `UserInMemoryDAO`; failed operations raise `UserDAOError`,
  which carries the HTTP status.
- `userservice.app` builds the Flask application with `create_app(dao)`,
  picks a store from the configuration with `create_dao(store)`, and runs
  the command through `main(argv)`.

The `userservice.lessons` package holds small, self-contained examples:
`basics` (enums, simple value types, JSON parsing, list and dict helpers),
`functions` (closures, currying, composition, iterative `sqrt` and `ln`),
`generics` (generic points, an optional `Maybe` value, `max_of`),
`pets` (colours and greeting pets) and `errors` (user lookups that fail
with exceptions). Each has a `main()` that prints a short demonstration.

## What it does not do

- Users live only in memory: nothing is written to disk or to a database,
  and every restart begins again from the configured seed users.
- The server is Flask's development server; there is no production server
  setup, authentication or paging of the user list.