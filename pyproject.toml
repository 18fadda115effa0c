[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zerolaunch"
version = "0.1.0"
description = "Configuration, window layout and program-file discovery for a keyboard-driven application launcher."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "launcher",
    "application-launcher",
    "desktop",
    "configuration",
    "file-scanning",
    "wildcard",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["zerolaunch"]

[tool.hatch.build.targets.sdist]
include = [
    "zerolaunch",
    "tests",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
