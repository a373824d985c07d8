[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structlab"
version = "0.1.0"
description = "Classic data structures and algorithms: linked lists, stacks, queues, dynamic arrays, binary search trees, graphs and Polish notation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "stack",
    "queue",
    "dynamic array",
    "binary search tree",
    "graph",
    "bfs",
    "dfs",
    "polish notation",
    "postfix",
    "prefix",
    "expression tree",
]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structlab-bfs = "structlab.trees:main"
structlab-graph = "structlab.graph:main"

[tool.hatch.build.targets.wheel]
packages = ["structlab"]

[tool.pytest.ini_options]
addopts = "-ra"
