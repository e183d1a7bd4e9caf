[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shooter"
version = "0.1.0"
description = "A small top-down game built on an entity-component design with pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "top-down", "entity-component", "behaviour-tree", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shooter = "shooter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
