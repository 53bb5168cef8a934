[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynprog"
version = "0.1.0"
description = "Classic dynamic programming problems, each solved several ways: recursion, memoization, tabulation and space-optimized passes."
requires-python = ">=3.10"
dependencies = []
keywords = ["dynamic programming", "algorithms", "memoization", "tabulation", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["dynprog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
