[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svmmerkle"
version = "0.1.1"
description = "Merkle trees and Merkle proofs with SHA-256 or Keccak-256 hashing and configurable hash truncation"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["merkle", "merkle-tree", "merkle-proof", "sha256", "keccak", "spv", "airdrop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["svmmerkle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
