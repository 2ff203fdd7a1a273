[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "litescheme"
version = "0.1.0"
description = "Discover the schema of an SQLite database and write it back out as SQL"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "schema", "discovery", "introspection", "ddl"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["litescheme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
