[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bufedit"
version = "0.1.0"
description = "In-memory audio buffer editing: normalize, fades, cut and paste, reverse, ring modulation, shuffle, with one level of undo"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "buffer", "editing", "dsp", "undo", "fade", "normalize", "ring modulation"]
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
    "Topic :: Multimedia :: Sound/Audio :: Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bufedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
