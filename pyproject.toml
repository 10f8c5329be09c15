[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basic_practice"
version = "0.1.0"
description = "Small concurrency, file and WebSocket exercises: thread-safe counters, a left-right cell, a concurrent stack, a mutex versus reader-writer lock benchmark, and a WebSocket client and server."
requires-python = ">=3.10"
keywords = [
    "concurrency",
    "threading",
    "left-right",
    "mutex",
    "rwlock",
    "websocket",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]
dependencies = [
    "websockets",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
bp-counters = "basic_practice.counters:main"
bp-events = "basic_practice.events:main"
bp-stack = "basic_practice.stack:main"
bp-left-right = "basic_practice.left_right:main"
bp-swap = "basic_practice.swap:main"
bp-shared-reads = "basic_practice.shared_reads:main"
bp-lockbench = "basic_practice.lockbench:main"
bp-fileread = "basic_practice.fileread:main"
bp-upbit = "basic_practice.upbit:main"
bp-ws-server = "basic_practice.ws_server:main"
bp-ws-client = "basic_practice.ws_client:main"

[tool.hatch.build.targets.wheel]
packages = ["basic_practice"]

[tool.hatch.build.targets.sdist]
include = ["basic_practice", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
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
