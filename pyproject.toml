[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombiesurvival"
version = "0.1.0"
description = "A top-down zombie survival shooter with waves of enemies and falling asteroids."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "shooter", "zombies", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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
zombiesurvival = "zombiesurvival.game:main"

[tool.hatch.build.targets.wheel]
packages = ["zombiesurvival"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
