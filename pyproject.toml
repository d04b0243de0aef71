[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snipstash"
version = "0.1.0"
description = "A small command-line manager for text snippets kept in a JSON file"
requires-python = ">=3.10"
dependencies = []
keywords = ["snippets", "cli", "notes", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snipstash = "snipstash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["snipstash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
