[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidedeck"
version = "0.1.0"
description = "Building blocks for terminal presentations: comment commands, front matter, build options, lists, tables and image attributes"
requires-python = ">=3.10"
keywords = ["presentation", "slides", "terminal", "markdown", "front-matter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Presentation",
    "Typing :: Typed",
]
dependencies = [
    "pyyaml>=6.0",
    "wcwidth>=0.2.6",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["slidedeck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
