[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eternity"
version = "1.0.0"
description = "Edge-matching puzzle solver and solution checker in the style of Eternity II"
requires-python = ">=3.10"
dependencies = []
keywords = ["eternity", "edge-matching", "puzzle", "backtracking", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
eternity-solve = "eternity.solver:main"
eternity-parallel = "eternity.parallel:main"
eternity-check = "eternity.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["eternity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
