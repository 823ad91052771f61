[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "commentedit"
version = "0.1.0"
description = "Extract, review and rewrite the comments in source files, with a small desktop editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["comments", "source code", "documentation", "editor", "refactoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
commentedit = "commentedit.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["commentedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
