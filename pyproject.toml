[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalab"
version = "0.1.0"
description = "Data-structure and algorithm exercises: bucketed hash tables, counted and traced sorting methods, and big integers in bases 2, 8, 10 and 16 with an RPN evaluator."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash table",
    "sorting",
    "quicksort",
    "heapsort",
    "shellsort",
    "radix sort",
    "big integer",
    "reverse polish notation",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Natural Language :: Spanish",
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
dsalab-hash = "dsalab.hash_cli:main"
dsalab-sort = "dsalab.sort_cli:main"
dsalab-rpn = "dsalab.rpn_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
