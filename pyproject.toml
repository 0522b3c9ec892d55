[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emdmsa"
version = "0.1.0"
description = "Progressive multiple sequence alignment of proteins scored by earth mover's distance over residue profiles"
requires-python = ">=3.10"
dependencies = []
keywords = ["bioinformatics", "multiple sequence alignment", "protein", "earth mover's distance", "guide tree", "fasta"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
emdmsa = "emdmsa.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["emdmsa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
