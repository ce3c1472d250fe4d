[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdings13f"
version = "0.1.0"
description = "Collect institutional holdings from SEC 13F-HR filings into a SQLite database"
requires-python = ">=3.10"
dependencies = []
keywords = ["sec", "edgar", "13f", "holdings", "sqlite", "finance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
holdings13f = "holdings13f.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["holdings13f"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
