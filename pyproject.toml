[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deluxels"
version = "0.1.0"
description = "File metadata, icons, sizes, dates and sorting for a modern directory lister"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "filesystem", "listing", "icons", "directory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["deluxels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
