[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftfmt"
version = "1.0.0"
description = "A small, strict printf-style formatter supporting %c %s %d %i %u %x %X %p and %%."
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "formatting", "string"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
