[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "querytree"
version = "0.1.0"
description = "Tokenize and parse boolean search queries into a nested index-stream-reader tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "query", "parser", "boolean", "tokenizer", "search-engine"]
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
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
querytree = "querytree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["querytree"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
