[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solvers for classic coding-assessment problems: dynamic programming, graphs, grids and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "graphs",
    "competitive-programming",
    "interview",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contestkit = "contestkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
addopts = "-ra"
