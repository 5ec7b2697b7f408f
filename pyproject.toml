[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubiesearch"
version = "0.1.0"
description = "Cubie-level Rubik's cube model with move parsing, sequence simplification and brute-force search"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubiks-cube", "puzzle", "search", "cubie", "brute-force"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
cubiesearch = "cubiesearch.search:main"

[tool.hatch.build.targets.wheel]
packages = ["cubiesearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
