[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ringipc"
version = "0.1.0"
description = "Interactive producer-consumer demo over a bounded ring of CRC-checked messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["producer-consumer", "ring buffer", "threads", "synchronization", "crc16"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ringipc = "ringipc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ringipc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
