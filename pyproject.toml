[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "extbasics"
version = "0.1.0"
description = "Small utility building blocks: results, LRU cache, flag sets, endian and cast helpers, string utilities and pretty printing."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "lru-cache", "flags", "endian", "strings", "result"]
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
packages = ["extbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
