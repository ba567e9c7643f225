[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sctoolkit"
version = "0.1.0"
description = "Small toolkit of text buffers, containers, a lenient JSON reader/writer, config and CSV readers and a per-thread file logger"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "csv", "config", "logging", "binary-search-tree", "linked-list", "text-buffer"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sctoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
