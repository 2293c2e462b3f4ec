[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellsim"
version = "0.1.0"
description = "Console simulator of cellular network capacity for 2G through 5G radio technologies"
requires-python = ">=3.10"
dependencies = []
keywords = ["cellular", "network", "simulator", "spectrum", "capacity", "2G", "5G"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cellsim = "cellsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cellsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
