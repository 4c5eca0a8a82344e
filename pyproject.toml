[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsnscan"
version = "0.1.0"
description = "Byte-level JSON scanning: get, filter, strip, replace and clear values, and split an object into raw members"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "scanner", "filter", "extract", "replace", "bytes"]
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
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsnscan"]

[tool.pytest.ini_options]
addopts = "-ra"
