[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pilha"
version = "0.1.0"
description = "Fixed-capacity stack, circular queue and singly linked list with interactive text menus"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "queue", "circular queue", "linked list", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
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
pilha = "pilha.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["pilha"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
