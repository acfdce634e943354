[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "tp2"
version = "0.1.0"
description = "Small simulations: a file-backed Pokédex, drones sharing take-off zones, and sensors feeding robots through a task queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["pokedex", "simulation", "threading", "concurrency", "producer-consumer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tp2-pokedex = "tp2.pokedex:main"
tp2-drones = "tp2.drones:main"
tp2-robots = "tp2.robots:main"

[tool.setuptools.packages.find]
include = ["tp2*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
