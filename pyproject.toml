[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "delverkit"
version = "0.1.0"
description = "Data-driven spawning toolkit for roguelike games: raw templates, weighted spawn tables, dice strings and name generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "spawn-table", "procedural-generation", "dice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["delverkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
