[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ristrettox"
version = "0.1.0"
description = "The Ristretto prime-order group over Curve25519, with field and scalar arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["ristretto", "curve25519", "elliptic-curve", "cryptography", "elligator", "scalar"]
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ristrettox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
