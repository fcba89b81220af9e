[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "humorlog"
version = "0.1.0"
description = "A small interactive mood journal: record daily moods, reasons and scores, then review averages and trends."
requires-python = ">=3.10"
keywords = ["mood", "journal", "diary", "wellbeing", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
humorlog = "humorlog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["humorlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
