[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "espterm_core"
version = "0.1.0"
description = "Core logic of a web-based serial terminal: streaming INI parsing, config value setters, mouse reporting, compact number encoding and status JSON."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "vt100", "ini", "mouse", "websocket", "gpio"]
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
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["espterm_core"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
