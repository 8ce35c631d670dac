[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustsense"
version = "0.1.0"
description = "Text utilities for code-completion tooling over Rust source: identifier scanning, closure detection, visibility stripping and source-path discovery"
requires-python = ">=3.10"
dependencies = []
keywords = ["rust", "completion", "source-analysis", "identifiers", "tooling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rustsense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
