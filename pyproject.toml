[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xplr"
version = "0.1.0"
description = "Explore a tree data file (JSON, YAML, TOML) in an interactive terminal tree view"
requires-python = ">=3.11"
keywords = ["json", "yaml", "toml", "tui", "tree", "explorer", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
xplr = "xplr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xplr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
