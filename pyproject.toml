[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bsqsolver"
version = "0.1.0"
description = "Find and mark the biggest square of free cells in a map of dots and obstacles"
requires-python = ">=3.10"
dependencies = []
keywords = ["bsq", "biggest square", "puzzle", "map", "printf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
setting-up = "bsqsolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bsqsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
