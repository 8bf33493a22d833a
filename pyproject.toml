[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tiles1024"
version = "0.1.0"
description = "A sliding-tile 1024 puzzle on a 4x4 grid, played in a Tk window or a terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["1024", "puzzle", "game", "tiles", "sliding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
tiles1024 = "tiles1024.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tiles1024"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
