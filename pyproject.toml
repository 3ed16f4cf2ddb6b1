[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kinectsketch"
version = "0.1.0"
description = "Egg-shaped face avatar, 2-D affine transforms and Bezier turtle outlines, computed as plain geometry"
requires-python = ">=3.10"
dependencies = []
keywords = ["avatar", "face-tracking", "geometry", "bezier", "affine", "turtle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kinectsketch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
