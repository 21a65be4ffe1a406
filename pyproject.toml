[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drills"
version = "0.1.0"
description = "Small worked exercises: number puzzles, parsers, data structures, a wire-format decoder, text widgets, concurrency demos, a link checker and a websocket chat."
requires-python = ">=3.10"
keywords = [
    "exercises",
    "education",
    "luhn",
    "collatz",
    "binary-tree",
    "varint",
    "dining-philosophers",
    "link-checker",
    "websocket-chat",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
    "websockets>=12.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
    "responses>=0.23",
]

[project.scripts]
drills-numbers = "drills.numbers:main"
drills-widgets = "drills.widgets:main"
drills-listdir = "drills.listdir:main"
drills-philosophers = "drills.philosophers:main"
drills-async-philosophers = "drills.async_philosophers:main"
drills-linkcheck = "drills.linkcheck:main"
drills-chat-server = "drills.chat_server:main"
drills-chat-client = "drills.chat_client:main"

[tool.hatch.build.targets.wheel]
packages = ["drills"]

[tool.hatch.build.targets.sdist]
include = ["drills", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
