[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "excal"
version = "0.1.0"
description = "Assembler for Excal assembly files, with the building blocks of a small stack machine"
requires-python = ">=3.10"
keywords = ["assembler", "bytecode", "virtual machine", "stack machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
excal = "excal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["excal"]

[tool.pytest.ini_options]
addopts = "-ra"
