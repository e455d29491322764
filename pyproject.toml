[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplechan"
version = "0.1.2"
description = "A small bounded multi-producer, single-consumer channel for threads."
requires-python = ">=3.10"
dependencies = []
keywords = ["channel", "concurrency", "mpsc", "queue", "threading", "ring-buffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
simplechan-demo = "simplechan.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["simplechan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
