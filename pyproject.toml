[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onekeymap"
version = "0.1.0"
description = "An editor-neutral keymap format with parsing, loading, merging, diffing and import/export services for editor keyboard shortcuts."
requires-python = ">=3.10"
keywords = [
    "keymap",
    "keybindings",
    "shortcuts",
    "editor",
    "diff",
    "merge",
]
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
    "Topic :: Text Editors",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["onekeymap"]

[tool.hatch.build.targets.sdist]
include = [
    "onekeymap",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
