[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinylinalg"
version = "0.1.0"
description = "Small dense linear algebra in pure Python: vectors, matrices, pseudo-inverse solving and a regression evaluator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear algebra",
    "matrix",
    "vector",
    "pseudo-inverse",
    "least squares",
    "regression",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
tinylinalg = "tinylinalg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinylinalg"]

[tool.pytest.ini_options]
addopts = "-ra"
