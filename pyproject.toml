[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "egor"
version = "0.2.0"
description = "A dead simple 2D graphics engine"
requires-python = ">=3.10"
keywords = ["2d", "graphics", "game", "sprites", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
egor-particles = "egor.particles:main"

[tool.hatch.build.targets.wheel]
packages = ["egor"]

[tool.pytest.ini_options]
addopts = "-ra"
