[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dunstkit"
version = "1.4.1"
description = "Building blocks of a lightweight desktop notification daemon: log levels, markup handling, icons, status tracking and a notification client command-line parser"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "notifications",
    "notification-daemon",
    "desktop",
    "markup",
    "icons",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[tool.hatch.build.targets.wheel]
packages = ["dunstkit"]

[tool.hatch.build.targets.sdist]
include = [
    "dunstkit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
