[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "wavecrawler"
version = "0.1.0"
description = "A turn-based wave-survival dungeon crawler for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "dungeon", "terminal", "turn-based", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
wavecrawler = "wavecrawler.terminal:main"

[tool.setuptools.packages.find]
include = ["wavecrawler*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
