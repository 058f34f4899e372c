[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "singlylinked"
version = "0.1.0"
description = "A small singly linked list with insertion, deletion, reversal, middle lookup and cycle detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "algorithms", "cycle detection"]
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
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
singlylinked-demo = "singlylinked.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["singlylinked"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
