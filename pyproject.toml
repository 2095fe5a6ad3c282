[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventkit"
version = "0.1.0"
description = "Solvers for daily programming puzzles from the 2022, 2023 and 2024 seasons, with a small command-line runner."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solutions", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventkit = "adventkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventkit"]

[tool.pytest.ini_options]
addopts = "-ra"
