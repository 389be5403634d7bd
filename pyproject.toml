[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labyrush"
version = "1.0.0"
description = "A text maze game played blind through a 5x5 view, with two maze generators and an automatic solver."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "game", "a-star", "union-find", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
labyrush = "labyrush.cli:main"
labyrush-solver = "labyrush.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["labyrush"]

[tool.pytest.ini_options]
addopts = "-ra"
