[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dungeonquest"
version = "1.0.0"
description = "A small terminal dungeon crawler with characters, monsters, treasure and high scores"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "roguelike", "dungeon", "role-playing", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeonquest = "dungeonquest.game:main"

[tool.setuptools.packages.find]
include = ["dungeonquest*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
