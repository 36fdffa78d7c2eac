[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iguanadave"
version = "0.1.0"
description = "Space Iguana Dave: a choose-your-own-adventure text game for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text adventure", "interactive fiction", "rpg", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iguanadave = "iguanadave.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iguanadave"]

[tool.pytest.ini_options]
addopts = "-ra"
