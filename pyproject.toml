[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kbopt"
version = "0.1.0"
description = "Analyse and optimise split keyboard layouts against a text corpus"
requires-python = ">=3.10"
dependencies = []
keywords = ["keyboard", "layout", "sfb", "optimisation", "simulated-annealing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kbopt = "kbopt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kbopt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
