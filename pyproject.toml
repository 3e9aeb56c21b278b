[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fefteen"
version = "0.1.0"
description = "The classic fifteen sliding-tile puzzle, played with the arrow keys in a terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "fifteen", "sliding-tiles", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fefteen = "fefteen.game:main"

[tool.hatch.build.targets.wheel]
packages = ["fefteen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
