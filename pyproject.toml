[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datagramtls"
version = "0.1.0"
description = "Building blocks for a DTLS 1.2 stack: cipher suite registry, handshake fragment reassembly, handshake cache and an in-memory datagram pipe"
requires-python = ">=3.10"
dependencies = []
keywords = ["dtls", "tls", "handshake", "datagram", "cipher suite", "security"]
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
    "Topic :: Internet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["datagramtls"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
