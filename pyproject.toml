[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thrustpad"
version = "0.1.0"
description = "A small arcade movement model: sideways steps, upward thrust and gravity advanced frame by frame."
requires-python = ">=3.10"
dependencies = []
keywords = ["arcade", "game", "physics", "thrust", "gravity", "signals"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
thrustpad = "thrustpad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["thrustpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
