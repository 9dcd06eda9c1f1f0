[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dodgerun"
version = "0.1.0"
description = "Building blocks for a small arcade game: vectors, colliders, input state, camera, particles, and image, model and sound banks."
requires-python = ">=3.10"
keywords = ["game", "arcade", "collision", "particles", "input", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dodgerun"]

[tool.pytest.ini_options]
addopts = "-ra"
