[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eccore"
version = "0.1.0"
description = "Curve-agnostic elliptic curve scalars, JSON Web Keys and key encapsulation interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["elliptic-curve", "ecc", "jwk", "kem", "scalar", "cryptography"]
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
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eccore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
