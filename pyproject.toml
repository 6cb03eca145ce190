[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smalletl"
version = "0.1.0"
description = "Error taxonomy, configuration validation, logging setup and process monitoring for small ETL jobs"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["etl", "validation", "errors", "logging", "monitoring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["smalletl"]

[tool.pytest.ini_options]
addopts = "-ra"
