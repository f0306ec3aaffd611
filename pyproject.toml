[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "appmasajistas"
version = "0.1.0"
description = "Console application for managing massage therapists, with a fixed-width record file"
requires-python = ">=3.10"
dependencies = []
keywords = ["masajistas", "gestion", "console", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
appmasajistas = "appmasajistas.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["appmasajistas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
