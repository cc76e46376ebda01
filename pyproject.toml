[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "padcore"
version = "0.1.0"
description = "Editing core of a simple text editor: buffer, undo/redo, indentation, search and replace, menu state and settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["text editor", "undo", "redo", "indentation", "search", "replace", "text buffer"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["padcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
