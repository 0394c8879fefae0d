[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concpatterns"
version = "0.1.0"
description = "Runnable demonstrations of common concurrency patterns built on threads and queues"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threads",
    "pipeline",
    "fan-out",
    "worker-pool",
    "pubsub",
    "rate-limiting",
    "singleflight",
    "mapreduce",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cmp-pattern = "concpatterns.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["concpatterns"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
