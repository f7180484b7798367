[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dirjump"
version = "0.1.0"
description = "Jump to directories by name, ranked by how often and how recently you visit them"
requires-python = ">=3.10"
dependencies = []
keywords = ["cd", "directory", "jump", "navigation", "shell", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dirjump = "dirjump.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dirjump"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
