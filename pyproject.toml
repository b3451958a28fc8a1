[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "piratedefense"
version = "0.1.0"
description = "A small pirate-themed tower defense game with a terminal and a graphical front end"
requires-python = ">=3.10"
keywords = ["game", "tower-defense", "pirate", "pygame", "terminal"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
piratedefense = "piratedefense.menu:main"
piratedefense-txt = "piratedefense.txtgame:main"

[tool.hatch.build.targets.wheel]
packages = ["piratedefense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
