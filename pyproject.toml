[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cses_kit"
version = "0.1.0"
description = "Solutions to classic CSES competitive-programming problems as a Python library and command."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cses",
    "competitive-programming",
    "algorithms",
    "dynamic-programming",
    "sorting",
    "puzzles",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cses-kit = "cses_kit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cses_kit"]

[tool.pytest.ini_options]
addopts = "-ra"
