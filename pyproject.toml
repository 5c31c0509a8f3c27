[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphdrills"
version = "0.1.0"
description = "Classic graph algorithms and graph-based puzzle solvers: traversals, shortest paths, spanning trees, connectivity, DAGs, grids and disjoint sets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "kruskal",
    "prim",
    "tarjan",
    "kosaraju",
    "topological-sort",
    "union-find",
    "bfs",
    "dfs",
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphdrills-mst = "graphdrills.spanning_trees:main"
graphdrills-scc = "graphdrills.connectivity:main"

[tool.hatch.build.targets.wheel]
packages = ["graphdrills"]

[tool.hatch.build.targets.sdist]
include = ["graphdrills", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
