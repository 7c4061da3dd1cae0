[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mipconv"
version = "2.6.0"
description = "Helpers for converting climate model output to MIP conventions: index sequences, site locations, tripolar grids and settings."
requires-python = ">=3.10"
dependencies = []
keywords = ["climate", "cmip", "mip", "tripolar", "grid", "site-locations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mipconv"]

[tool.pytest.ini_options]
addopts = "-ra"
