[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdit-common"
version = "0.6.1"
description = "Building blocks for markdown parsers: rule ordering, source maps, entity and link helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "commonmark", "parser", "sourcemap", "plugins", "entities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mdit_common"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
