[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "automatas"
version = "0.1.0"
description = "Cellular automata building blocks: an elementary rule 110 automaton, a classic Langton's ant simulation, a multi-colour tape and a Game of Life cell."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cellular automata",
    "langton's ant",
    "rule 110",
    "game of life",
    "simulation",
    "artificial life",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
langton-ant = "automatas.langton.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["automatas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
