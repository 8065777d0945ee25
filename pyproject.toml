[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "convoy"
version = "1.0.0"
description = "Layered pixel-art canvas, drawing tools, brushes, palettes and colour math"
requires-python = ">=3.10"
dependencies = []
keywords = ["pixel-art", "sprite", "canvas", "brush", "color", "palette", "raster"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["convoy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
