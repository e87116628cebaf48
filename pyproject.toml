[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfrstates"
version = "0.1.0"
description = "Game states for Leduc and no-limit Texas hold'em poker, suited to counterfactual regret minimisation"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "cfr", "game-theory", "leduc", "holdem"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cfrstates"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
