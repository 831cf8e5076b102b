[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "squaletools"
version = "1.1.0"
description = "Host-side tools for the Apollo Squale: cartridge ROM images, cassette WAV files, bitmap to vector sprite conversion, LZH decoding and EF9365 2D/3D vector helpers"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "squale",
    "6809",
    "retrocomputing",
    "cartridge",
    "cassette",
    "wav",
    "lzh",
    "ef9365",
    "sprite",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[project.scripts]
squale-build-cartridge = "squaletools.cartridge:main"
squale-build-cassette-wave = "squaletools.cassette:main"
squale-bmp2vect = "squaletools.vectorize:main"

[tool.setuptools.packages.find]
include = ["squaletools*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
