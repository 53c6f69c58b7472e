[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vertexcover"
version = "0.1.0"
description = "Minimum vertex cover (SAT-based and greedy) and shortest paths for small undirected graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "vertex cover", "sat", "cnf", "dijkstra", "greedy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vertexcover = "vertexcover.cli:main"
vertexcover-benchmark = "vertexcover.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["vertexcover"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
