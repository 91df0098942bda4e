[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bybitapi"
version = "2.0.0"
description = "Bybit spot v1 and v5 account/asset endpoints over a pluggable transport, with response checks, mock servers and golden-file helpers"
requires-python = ">=3.10"
dependencies = [
    "websockets>=13",
]
keywords = ["bybit", "exchange", "trading", "crypto", "rest", "api", "websocket", "testing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bybitapi"]

[tool.hatch.build.targets.sdist]
include = ["bybitapi", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
