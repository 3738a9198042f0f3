[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "librarium"
version = "0.1.0"
description = "A small library management system that indexes books by title and publication year in AVL trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "avl-tree", "catalogue", "lending"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
librarium = "librarium.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["librarium"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
