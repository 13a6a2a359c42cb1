[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chartkit"
version = "0.1.0"
description = "Numeric building blocks for charts: matrices, polynomial regression, sequences and derived data series."
requires-python = ">=3.10"
dependencies = []
keywords = ["chart", "series", "regression", "matrix", "moving average", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chartkit"]

[tool.pytest.ini_options]
addopts = "-ra"
