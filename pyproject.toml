[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedkit"
version = "0.1.0"
description = "Node-based singly and doubly linked lists, a stack and a queue, with a demo command and an interactive queue menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "stack", "queue", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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

[project.scripts]
linkedkit-demo = "linkedkit.demo:main"
linkedkit-queue = "linkedkit.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["linkedkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
