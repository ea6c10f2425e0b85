[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoshelf"
version = "0.1.0"
description = "Classic algorithms and data structures in plain Python: sorting, searching, expression conversion, lists, queues, trees, graphs and a year calendar."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "infix",
    "postfix",
    "prefix",
    "dijkstra",
    "travelling-salesman",
    "linked-list",
    "queue",
    "binary-tree",
    "calendar",
    "education",
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
test = ["pytest", "hypothesis"]

[project.scripts]
algoshelf-calendar = "algoshelf.yearcalendar:main"

[tool.hatch.build.targets.wheel]
packages = ["algoshelf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
