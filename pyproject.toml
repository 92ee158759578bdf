[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "steam_gephi_export"
version = "0.1.0"
description = "Export the friend graph of monitored Steam users from MongoDB to a Gephi edge-list CSV"
requires-python = ">=3.10"
keywords = ["steam", "gephi", "graph", "mongodb", "csv", "social-network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = [
    "pymongo>=4.0",
    "python-dotenv>=1.0",
    "termcolor>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
steam-gephi-export = "steam_gephi_export.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["steam_gephi_export"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
