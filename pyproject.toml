[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xtetris"
version = "1.0.0"
description = "Turn-based terminal Tetris with single player, two player and player-versus-CPU modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "game", "terminal", "puzzle", "tetromino"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xtetris = "xtetris.game:main"

[tool.hatch.build.targets.wheel]
packages = ["xtetris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
