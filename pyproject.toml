[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codingdrills"
version = "0.1.0"
description = "Classic algorithm drills: prefix sums, two pointers, sorting, graph search, number theory and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "graphs", "sorting", "number theory", "practice"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codingdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
