"""A JSON user service over HTTP with an in-memory store, name validation and YAML configuration."""

__version__ = "0.1.0"