[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sollong"
version = "0.1.0"
description = "A small tile-based puzzle game: collect every coin, then reach the exit."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "puzzle", "tiles", "maze", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
sollong = "sollong.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sollong"]

[tool.pytest.ini_options]
addopts = "-ra"
