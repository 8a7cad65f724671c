[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evenodd"
version = "0.1.0"
description = "Generate random numbers across worker threads and sort them into shared even and odd lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["threads", "even", "odd", "random", "concurrency"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
evenodd = "evenodd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["evenodd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
