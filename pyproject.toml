[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailydrills"
version = "0.1.0"
description = "Small, self-contained exercises: parsing, error handling, tagged data, state machines, file statistics and a tiny device gateway."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "pattern-matching",
    "state-machine",
    "word-count",
    "cli",
    "gateway",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
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
dailydrills-gateway = "dailydrills.gateway:main"
wc-light = "dailydrills.wordcount:count_main"
dailydrills-analyze = "dailydrills.wordcount:main"
dailydrills-cli = "dailydrills.commands:main"

[tool.hatch.build.targets.wheel]
packages = ["dailydrills"]

[tool.hatch.build.targets.sdist]
include = ["dailydrills", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["dailydrills"]
warn_unused_ignores = true
