[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sevencolors"
version = "0.1.0"
description = "The 7 colours board game with computer players, a console arena, Elo rankings and a pygame interface"
requires-python = ">=3.10"
keywords = ["game", "board game", "seven colors", "minimax", "alpha-beta", "elo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sevencolors = "sevencolors.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sevencolors"]

[tool.pytest.ini_options]
addopts = "-ra"
