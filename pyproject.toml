[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherlab"
version = "0.1.0"
description = "Classical ciphers, number theory, public-key schemes and step-by-step AES and DES"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "aes",
    "des",
    "rsa",
    "elgamal",
    "dsa",
    "diffie-hellman",
    "caesar",
    "vigenere",
    "playfair",
    "modular-arithmetic",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cipherlab = "cipherlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherlab"]

[tool.hatch.build.targets.sdist]
include = ["cipherlab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
