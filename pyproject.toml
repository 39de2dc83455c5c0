[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "officebeat"
version = "0.1.0"
description = "A small rhythm game: hit the beats on time while the office boss strikes a pose."
requires-python = ">=3.10"
keywords = ["game", "rhythm", "pygame", "gif", "hitbox"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
officebeat = "officebeat.game:main"

[tool.hatch.build.targets.wheel]
packages = ["officebeat"]

[tool.hatch.build.targets.sdist]
include = ["officebeat", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
