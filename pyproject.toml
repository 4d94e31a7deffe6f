[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "userservice"
version = "0.1.0"
description = "A small JSON user service over HTTP with an in-memory store, name validation and YAML configuration"
requires-python = ">=3.10"
keywords = ["rest", "http", "users", "crud", "flask", "validation", "yaml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
userservice = "userservice.app:main"

[tool.hatch.build.targets.wheel]
packages = ["userservice"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
