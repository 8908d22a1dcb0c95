[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritequest"
version = "0.1.0"
description = "A small sprite-based role-playing game with a main menu, an animated player and a stack of game states"
requires-python = ">=3.10"
keywords = ["game", "rpg", "pygame", "sprite", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spritequest = "spritequest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spritequest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
