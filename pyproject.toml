[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vopix"
version = "0.1.0"
description = "Vector math, containers, logging and UI batching helpers for a voxel game engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "game", "engine", "trie", "vector", "matrix", "ui", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vopix"]

[tool.pytest.ini_options]
addopts = "-ra"
