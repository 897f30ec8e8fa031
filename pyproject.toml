[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinylibc"
version = "0.1.0"
description = "C-style helpers for Python: conversions, string routines, approximate math, printf/scanf, environment lookup, a simulated heap and a gcc wrapper"
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "strings", "printf", "scanf", "malloc", "environment", "gcc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wcc = "tinylibc.compiler:main"
tinylibc-getenv = "tinylibc.envprompt:main"

[tool.hatch.build.targets.wheel]
packages = ["tinylibc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
