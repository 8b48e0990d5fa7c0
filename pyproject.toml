[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teritori-chain"
version = "0.1.0"
description = "Block-by-block token minting, reward distribution and team vesting for a Cosmos-style blockchain, modelled in pure Python"
requires-python = ">=3.10"
keywords = [
    "blockchain",
    "cosmos",
    "minting",
    "inflation",
    "vesting",
    "bech32",
    "secp256k1",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "pycryptodome",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["teritori_chain"]

[tool.hatch.build.targets.sdist]
include = [
    "teritori_chain",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
