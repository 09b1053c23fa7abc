[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "denarius"
version = "0.1.0"
description = "A small terminal kingdom-management game: provinces, taxes, denars and a ticking calendar."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "curses", "simulation", "strategy", "kingdom"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
denarius = "denarius.app:main"

[tool.hatch.build.targets.wheel]
packages = ["denarius"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
