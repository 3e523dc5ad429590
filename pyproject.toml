[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "topotactics"
version = "0.1.0"
description = "A two-player networked seating-arrangement board game played on a graph"
requires-python = ">=3.10"
keywords = ["game", "board-game", "graph", "multiplayer", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
topotactics-server = "topotactics.server:main"
topotactics-client = "topotactics.client:main"

[tool.hatch.build.targets.wheel]
packages = ["topotactics"]

[tool.pytest.ini_options]
addopts = "-ra"
