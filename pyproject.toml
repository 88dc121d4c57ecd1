[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pngparse"
version = "0.1.0"
description = "A small pure-Python PNG decoder with its own zlib/DEFLATE and Huffman implementation"
requires-python = ">=3.10"
dependencies = []
keywords = ["png", "deflate", "zlib", "huffman", "image", "decoder"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pngparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
