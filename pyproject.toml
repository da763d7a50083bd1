[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphwizard"
version = "0.1.0"
description = "Structural anomaly detection and synthetic graph generators over a small in-memory undirected graph model"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "network",
    "anomaly detection",
    "random graphs",
    "barabasi-albert",
    "erdos-renyi",
    "karate club",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graphwizard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
