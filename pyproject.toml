[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubbme"
version = "0.1.0"
description = "Repositories and use cases for the Bubbme back office: catalogs, items, balances, moods and accounts"
requires-python = ">=3.10"
dependencies = []
keywords = ["backend", "cms", "repository", "usecase", "back-office"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bubbme"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
