[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jyamiti"
version = "0.1.0"
description = "Computational geometry in the plane: binary space partitions, polygon triangulation and Voronoi diagrams"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "computational-geometry",
    "voronoi",
    "fortune",
    "triangulation",
    "ear-clipping",
    "bsp",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jyamiti-demo = "jyamiti.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["jyamiti"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
