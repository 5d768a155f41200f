[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elfnm"
version = "0.1.0"
description = "Building blocks for an nm-style symbol lister: option parsing, symbol-name ordering, formatted output and text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["nm", "symbols", "sorting", "printf", "linked-list", "strings"]
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
    "Topic :: Software Development :: Disassemblers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["elfnm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
