[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recurkit"
version = "0.1.0"
description = "Small algorithms on integers and integer sequences, with a built-in check runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "exercises", "tribonacci", "binary-search", "digits", "power-of-four"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
recurkit = "recurkit.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["recurkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
