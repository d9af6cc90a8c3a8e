[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minisql"
version = "0.1.0"
description = "A small storage engine: heap files, slotted pages, an LRU buffer pool and sequential scans."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "heap file", "buffer pool", "storage engine", "slotted page"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minisql"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
