[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdlogtools"
version = "0.1.0"
description = "Tools for SD card data-logger files: binary ADC log conversion, logger record formats and FAT directory-entry helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["fat", "fat32", "sd card", "data logger", "adc", "csv", "8.3 names", "directory entry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sdlog-bintocsv = "sdlogtools.bintocsv:main"

[tool.hatch.build.targets.wheel]
packages = ["sdlogtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
