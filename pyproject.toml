[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "par2kit"
version = "1.0.0"
description = "Building blocks for PAR 1.0 and PAR 2.0 parity archives: MD5 hashing, Galois field arithmetic, PAR 1.0 records, path helpers and disk file access."
requires-python = ">=3.10"
dependencies = []
keywords = ["par2", "par1", "parity", "galois", "md5", "recovery", "archive"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["par2kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
