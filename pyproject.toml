[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "newshell"
version = "0.1.0"
description = "A small interactive and batch command shell with aliases, history, pipes and output redirection"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "pipeline", "history", "alias"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
newshell = "newshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["newshell"]

[tool.pytest.ini_options]
addopts = "-ra"
