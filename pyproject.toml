[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hqcprim"
version = "0.1.0"
description = "Pure-Python primitives for HQC: Keccak/SHA-3/SHAKE, GF(2^8) arithmetic, additive FFT, sparse polynomial products and word packing"
requires-python = ">=3.10"
dependencies = []
keywords = ["hqc", "post-quantum", "keccak", "sha3", "shake", "galois-field", "fft", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["hqcprim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
