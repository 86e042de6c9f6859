[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tokenqueue"
version = "0.1.0"
description = "A service-counter token machine that hands out queue tokens with estimated waiting times"
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "token", "service counter", "waiting time", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tokenqueue = "tokenqueue.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tokenqueue"]

[tool.pytest.ini_options]
addopts = "-ra"
