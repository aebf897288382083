[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warrenwild"
version = "0.1.0"
description = "A grid-world predator and prey simulation of rabbits, foxes and spreading grass"
requires-python = ">=3.10"
keywords = ["simulation", "predator-prey", "ecology", "artificial-life", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
warrenwild = "warrenwild.game:main"

[tool.hatch.build.targets.wheel]
packages = ["warrenwild"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
