[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tricircle"
version = "0.1.0"
description = "Place three points on a grayscale canvas and draw the circle that passes through them"
requires-python = ">=3.10"
dependencies = []
keywords = ["circle", "circumcircle", "geometry", "raster", "grayscale", "pgm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tricircle = "tricircle.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tricircle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
