[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "histkit"
version = "0.1.0"
description = "Building blocks for shell history tools: duration formatting, line editing, list formatting, usage statistics and result ranking"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "history", "search", "statistics", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["histkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
