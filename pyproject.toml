[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smarthome"
version = "0.1.0"
description = "Interactive command-line controller for heating, lighting and security in a small smart home"
requires-python = ">=3.10"
dependencies = []
keywords = ["smart home", "home automation", "heating", "lighting", "repl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: German",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smarthome = "smarthome.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["smarthome"]

[tool.pytest.ini_options]
addopts = "-ra"
