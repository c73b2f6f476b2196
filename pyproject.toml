[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellby"
version = "0.1.0"
description = "A small UNIX command interpreter with aliases, builtins and command chaining"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command interpreter", "unix", "sh"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shellby = "shellby.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["shellby"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
