[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jardin"
version = "0.1.0"
description = "Garden records in a SQLite database: crops, observations, contacts, planner phases and SQL script import/export"
requires-python = ">=3.10"
dependencies = []
keywords = ["garden", "crops", "sqlite", "planning", "horticulture"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jardin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
