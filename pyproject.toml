[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sidequest"
version = "0.1.0"
description = "Quest and user models with SQLite-backed quest storage for the Sidequest server"
requires-python = ">=3.10"
keywords = ["sqlite", "persistence", "quests", "crud", "prepared-statements"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sidequest-server = "sidequest.main:main"

[tool.hatch.build.targets.wheel]
packages = ["sidequest"]

[tool.pytest.ini_options]
addopts = "-ra"
