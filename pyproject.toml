[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "athena"
version = "0.1.0"
description = "Building blocks for an Attorney Online 2 server: packets, permissions, user IDs, logging, settings and master-server advertising."
requires-python = ">=3.11"
keywords = ["attorney-online", "ao2", "game-server", "roleplay"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["athena"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
