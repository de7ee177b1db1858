[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "aoc2022"
version = "0.1.0"
description = "Solutions to a set of 2022 programming puzzles: file trees, tree grids, ropes, a CPU, heightmaps, packets, sand, sensors, falling rocks, lava droplets and mixing."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "simulation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["aoc2022*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
