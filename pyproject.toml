[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchcore"
version = "0.1.0"
description = "Core helpers for micro-benchmarking: summary statistics, machine information, name filtering and number formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "statistics", "cpu", "sysinfo", "formatting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["benchcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
