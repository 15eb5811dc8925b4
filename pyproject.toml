[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onyx"
version = "0.1.0"
description = "A minimax move-picking agent for the Splendor board game, speaking a simple token protocol over stdin and stdout."
requires-python = ">=3.10"
dependencies = []
keywords = ["splendor", "board-game", "minimax", "game-ai", "agent"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
onyx = "onyx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["onyx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
