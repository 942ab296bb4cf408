[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relquery"
version = "0.1.0"
description = "Building blocks for in-memory relational queries: bucket lists, comparison filters, sort-merge joins and query batch loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "query", "join", "relations", "bloom-filter", "sort-merge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["relquery"]

[tool.pytest.ini_options]
addopts = "-ra"
