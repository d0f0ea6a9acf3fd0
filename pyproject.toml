[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catalogo"
version = "0.1.0"
description = "Interactive terminal catalogue of films stored in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["films", "catalogue", "movies", "terminal", "menu"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
catalogo = "catalogo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["catalogo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
