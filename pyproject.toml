[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkwork"
version = "0.1.0"
description = "Singly and doubly linked lists with classic list algorithms, plus small number utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "doubly linked list",
    "data structures",
    "algorithms",
    "palindrome",
    "cycle detection",
    "zigzag",
    "prime",
    "factorial",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
