[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "caro"
version = "1.0.0"
description = "Caro (marks in a row) for the terminal, with a two-player mode and two computer opponents"
requires-python = ">=3.10"
dependencies = []
keywords = ["caro", "gomoku", "tic-tac-toe", "board game", "terminal", "alpha-beta"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
caro = "caro.game:main"

[tool.hatch.build.targets.wheel]
packages = ["caro"]

[tool.pytest.ini_options]
addopts = "-ra"
