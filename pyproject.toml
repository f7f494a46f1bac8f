[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spotui"
version = "0.1.0"
description = "Building blocks for a terminal music player: user configuration, key bindings, themes, table layout, input events and playback formatting"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["terminal", "music", "player", "tui", "keybindings", "theme"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spotui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
