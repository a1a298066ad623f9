[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enhanced_input"
version = "0.24.2"
description = "Input modifiers, a binding preset base class and state-driven context activation for game input handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["input", "gamepad", "keyboard", "game", "modifiers", "bindings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enhanced_input"]

[tool.pytest.ini_options]
addopts = "-ra"
