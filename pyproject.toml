[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strtrimkit"
version = "0.1.0"
description = "Strip a chosen set of characters from both ends of a string."
requires-python = ">=3.10"
keywords = ["string", "trim", "strip", "text"]
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
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["strtrimkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
