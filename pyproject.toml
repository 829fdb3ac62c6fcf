[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arscrew"
version = "0.1.0"
description = "Game state and rules for a side-scrolling screwdriver platformer: TMX levels, player, screws, ramps, HUD layout and small math helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "tmx", "tilemap", "2d", "side-scroller"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arscrew"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
