[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordclock"
version = "10"
description = "Word clock LED matrix model, glyph font, settings layout and firmware update checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordclock", "led", "neopixel", "matrix", "ota", "firmware"]
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
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wordclock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
