[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ticketdesk"
version = "0.1.0"
description = "A console help desk for registering and listing technical-service tickets, with small container types"
requires-python = ">=3.10"
dependencies = []
keywords = ["tickets", "help desk", "technical service", "list", "heap", "map", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
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
ticketdesk = "ticketdesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ticketdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
