[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jeuechecs"
version = "0.1.0"
description = "A two-player chess board with drag-and-drop moves, turn tracking and self-check protection"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "echecs", "board game", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jeuechecs = "jeuechecs.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["jeuechecs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
