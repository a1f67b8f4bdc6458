[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feedxml"
version = "0.1.0"
description = "A small, navigable XML document and node model for reading feed files"
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "rss", "feed", "dom", "parser"]
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
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["feedxml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
