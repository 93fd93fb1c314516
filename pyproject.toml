[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "besiege"
version = "0.1.0"
description = "Building blocks for an HTTP load tester: cookies, caching, dates, statistics, worker crews and URL files"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "load-testing", "benchmark", "cookies", "cache"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: Traffic Generation",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["besiege"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
