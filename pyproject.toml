[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellui"
version = "0.1.0"
description = "Layout containers and widgets for character-cell terminal interfaces: frames, pages, grids and lists."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["terminal", "tui", "layout", "grid", "widgets", "console"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cellui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
