[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minifs"
version = "0.1.0"
description = "An in-memory toy file system with permissions, driven from an interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "shell", "in-memory", "permissions", "education"]
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
    "Topic :: System :: Filesystems",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minifs = "minifs.shell:main"
minifs-tree = "minifs.treeshell:main"

[tool.hatch.build.targets.wheel]
packages = ["minifs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
