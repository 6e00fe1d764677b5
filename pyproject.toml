[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "obliviion"
version = "0.1.0"
description = "A small 2D platformer with gravity, enemies, obstacles and a pause menu, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "pygame", "2d", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
obliviion = "obliviion.game:main"

[tool.hatch.build.targets.wheel]
packages = ["obliviion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
