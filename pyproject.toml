[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparseset"
version = "0.1.0"
description = "Typed element sets with set algebra, and sparse and dense integer matrices built on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["set", "sparse matrix", "dense matrix", "set algebra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sparseset-demo = "sparseset.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sparseset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
