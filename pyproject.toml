[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gas"
version = "0.1.0"
description = "A small game ability system: abilities, timed running effects and stacking buffs attached to a game unit"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "ability", "buff", "gameplay", "heap", "scheduler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gas-example = "gas.example.main:main"

[tool.hatch.build.targets.wheel]
packages = ["gas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
