[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordlekit"
version = "0.1.0"
description = "A five-letter word guessing game with guess scoring and an entropy-based guess strategy"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "word game", "puzzle", "entropy", "solver"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
wordlekit = "wordlekit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wordlekit"]

[tool.hatch.build.targets.sdist]
include = [
    "wordlekit",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["wordlekit"]
