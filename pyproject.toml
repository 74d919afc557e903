[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacewar"
version = "0.1.0"
description = "A local multiplayer space combat arcade game with a gravity well, orbiting power packs and homing missiles"
requires-python = ">=3.10"
keywords = ["game", "arcade", "spacewar", "multiplayer", "pygame", "gravity", "joystick"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
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
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spacewar = "spacewar.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spacewar"]

[tool.pytest.ini_options]
addopts = "-ra"
