[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplechain"
version = "0.1.0"
description = "A small proof-of-work blockchain with UTXO transactions and a command-line wallet"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["blockchain", "proof-of-work", "utxo", "wallet", "base58", "p256"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
simplechain = "simplechain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["simplechain"]

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
