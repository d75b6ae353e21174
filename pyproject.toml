[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tlescope"
version = "0.1.0"
description = "Interactive 3D Earth viewer with camera-facing billboards and a TLE file reader"
requires-python = ">=3.10"
keywords = ["tle", "satellite", "earth", "visualization", "globe", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tlescope = "tlescope.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tlescope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
