[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minex3"
version = "0.1.0"
description = "A small 2D arcade space-ship game with menus, a splash screen and screen-wrapping flight."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "spaceship", "2d"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minex3 = "minex3.game:main"

[tool.hatch.build.targets.wheel]
packages = ["minex3"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
