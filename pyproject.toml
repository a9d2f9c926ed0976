[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qrforge"
version = "0.1.0"
description = "Pure-Python QR code generator with automatic mode, version and mask selection"
requires-python = ">=3.10"
dependencies = []
keywords = ["qr", "qrcode", "barcode", "2d-code", "reed-solomon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qrforge = "qrforge.builder:main"

[tool.hatch.build.targets.wheel]
packages = ["qrforge"]

[tool.pytest.ini_options]
addopts = "-ra"
