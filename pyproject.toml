[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "docsearch"
version = "0.1.0"
description = "A small local search engine: an inverted index over text files, JSON-driven queries and ranked JSON answers."
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "inverted-index", "full-text", "ranking", "json"]
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
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
docsearch = "docsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["docsearch"]

[tool.pytest.ini_options]
addopts = "-ra"
