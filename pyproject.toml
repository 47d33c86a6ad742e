[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pikitui"
version = "1.0.0b0"
description = "Themes, key encoding and the text of panes, dialogs and bars for a multi-workspace terminal UI"
requires-python = ">=3.11"
dependencies = [
    "platformdirs",
]
keywords = ["terminal", "tui", "theme", "keybindings", "pty"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pikitui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
strict = true
