[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombieufo"
version = "0.1.0"
description = "A side-scrolling arcade game: a jumping zombie shoots down a hovering UFO that drops bugs on it."
requires-python = ">=3.10"
keywords = ["game", "arcade", "side-scroller", "pygame", "sprites"]
classifiers = [
    "Development Status :: 4 - Beta",
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
zombieufo = "zombieufo.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["zombieufo"]

[tool.pytest.ini_options]
addopts = "-ra"
