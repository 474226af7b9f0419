[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lawnmower"
version = "0.1.0"
description = "Lawn Mower Revolution: a one-minute arcade game about mowing grass and weeds"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "lawn", "mower"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lawnmower = "lawnmower.game:main"

[tool.hatch.build.targets.wheel]
packages = ["lawnmower"]

[tool.pytest.ini_options]
addopts = "-ra"
