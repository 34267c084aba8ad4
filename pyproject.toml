[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stegtool"
version = "0.1.0"
description = "Hide password-encrypted files in the least significant bits of an image's pixels"
requires-python = ">=3.10"
keywords = ["steganography", "lsb", "aes", "encryption", "image"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "cryptography",
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stegtool = "stegtool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stegtool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
