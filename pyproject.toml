[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "secpfun"
version = "0.1.0"
description = "Scalar and point arithmetic on the secp256k1 curve with tagged hashing, nonce generation and polynomial utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["secp256k1", "elliptic-curve", "cryptography", "schnorr", "bip340", "shamir"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["secpfun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
