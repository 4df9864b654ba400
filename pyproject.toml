[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dualscreen"
version = "0.1.0"
description = "Frame buffer drawing, bitmap fonts, packet protocol and app runner for a pair of 240x240 RGB565 screens"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rgb565",
    "framebuffer",
    "bitmap-font",
    "gb2312",
    "packet-protocol",
    "dual-screen",
    "animation",
]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dualscreen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
