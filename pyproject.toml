[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractoscope"
version = "1.0.0"
description = "Building blocks for a fractal explorer: printf-style formatting, viewports, sampled rendering, XPM reading and PPM export"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fractal",
    "viewport",
    "supersampling",
    "xpm",
    "ppm",
    "printf",
    "x11-colors",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fractoscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
