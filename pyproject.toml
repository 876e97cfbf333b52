[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrifried"
version = "1.0.0"
description = "A small arcade game: fling an egg from platform to platform and stay out of the lava."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "platformer"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
terrifried = "terrifried.app:main"

[tool.hatch.build.targets.wheel]
packages = ["terrifried"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
