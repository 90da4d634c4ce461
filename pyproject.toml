[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrollrun"
version = "0.1.0"
description = "A two-player side-scrolling game with split-screen cameras, a timer, score tracking and a best-scores screen."
requires-python = ">=3.10"
keywords = ["game", "side-scroller", "pygame", "split-screen", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scrollrun = "scrollrun.game:main"

[tool.hatch.build.targets.wheel]
packages = ["scrollrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
