[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mmrkit"
version = "0.1.0"
description = "Merkle Mountain Range navigation, inclusion proofs and consistency proofs"
requires-python = ">=3.10"
dependencies = []
keywords = ["merkle", "mmr", "merkle-mountain-range", "proof", "transparency-log", "accumulator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mmrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
