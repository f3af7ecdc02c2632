[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treegrep"
version = "0.1.0"
description = "Recursive, multi-threaded regular-expression search through a directory tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["grep", "search", "regex", "recursive", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treegrep = "treegrep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treegrep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
