[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "artifacts-sdk"
version = "0.1.0"
description = "Game data catalogues, gear evaluation and fight simulation for an online role-playing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "sdk", "simulation", "mmo"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["artifacts_sdk"]

[tool.pytest.ini_options]
addopts = "-ra"
