[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocraft"
version = "0.1.0"
description = "Backtracking, dynamic programming, number theory and bit manipulation algorithms as plain Python functions."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "backtracking",
    "dynamic-programming",
    "number-theory",
    "bit-manipulation",
    "puzzles",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algocraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
