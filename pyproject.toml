[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dutils"
version = "0.1.0"
description = "General utilities (strings, timestamps, line and binary files, config files, profiling) and small numpy-based computer-vision helpers"
requires-python = ">=3.10"
keywords = [
    "utilities",
    "timestamp",
    "profiler",
    "config",
    "computer-vision",
    "transformations",
    "numpy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dutils"]

[tool.pytest.ini_options]
addopts = "-ra"
