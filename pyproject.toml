[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "playground"
version = "0.1.0"
description = "Worked examples of data structures, design patterns and small system designs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "design-patterns",
    "low-level-design",
    "sorting",
    "priority-queue",
    "downloader",
    "examples",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
playground-download = "playground.downloader:main"

[tool.hatch.build.targets.wheel]
packages = ["playground"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
