[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threebc"
version = "0.1.4"
description = "Building blocks of a tiny register-based virtual machine for the 3BC low-level language"
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual-machine", "interpreter", "instruction-set", "assembly", "3bc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["threebc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
