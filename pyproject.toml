[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paxtables"
version = "0.1.0"
description = "Delimited text table tools: analysis, parsing, HTML export and csv concatenation, with point classification helpers and progress reporting."
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "table", "lidar", "las", "classification", "html", "progress"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["paxtables"]

[tool.pytest.ini_options]
addopts = "-ra"
